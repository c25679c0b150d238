"""
===============================================================================
GNC QUATERNION - Quaternion Algebra
===============================================================================

Single-precision quaternion value type for representing and composing 3D
orientations without the gimbal lock singularity of Euler angles.

Convention
----------
We use the scalar-first convention:

    q = [q_w, q_x, q_y, q_z] = q_w + q_x*i + q_y*j + q_z*k

where q_w is the scalar (real) part and [q_x, q_y, q_z] is the vector
(imaginary) part. Components are stored as numpy float32.

A 3-vector v is rotated with the sandwich product

    v' = q * v_pure * q_conjugate

where v_pure = [0, v_x, v_y, v_z] is the vector embedded as a pure
quaternion.

Unit length is NOT enforced at construction. Pure quaternions (w = 0) are
legitimate intermediate operands, so the class exposes an explicit
is_unit() predicate and normalize()/normalized() instead.

Error policy
------------
Misuse (wrong component count, inverting the zero quaternion) raises
ValueError. Numerical edge cases do not raise: normalizing the zero
quaternion leaves it unchanged, and Tait-Bryan extraction returns NaN when
floating-point drift pushes the arcsin argument outside [-1, 1].
===============================================================================
"""

import logging

import numpy as np
from typing import Union

from gnc_quat.constants import (
    FLOAT32_EPSILON,
    IDENTITY_COMPONENTS,
    QUATERNION_DTYPE,
    QUATERNION_SIZE,
    RAD2DEG,
    VECTOR_SIZE,
)

logger = logging.getLogger(__name__)

# Single-precision literals keep every intermediate in float32
_ONE = QUATERNION_DTYPE(1.0)
_TWO = QUATERNION_DTYPE(2.0)
_ZERO = QUATERNION_DTYPE(0.0)

ArrayLike = Union[np.ndarray, list, tuple]


class Quaternion:
    """
    Quaternion q = [w, x, y, z] in single precision.

    Instances behave as values: every operation except normalize() returns
    a new Quaternion and leaves the receiver untouched.

    Attributes
    ----------
    w : np.float32
        Scalar (real) component.
    x, y, z : np.float32
        Vector (imaginary) components.

    Examples
    --------
    >>> q = Quaternion(0.5, 0.5, 0.5, 0.5)
    >>> q.is_unit()
    True
    >>> q.rotate_vector([1.0, 0.0, 0.0])
    array([0., 1., 0.], dtype=float32)
    """

    # Mutable through normalize(), so not usable as a dict key
    __hash__ = None

    def __init__(self, w: float, x: float, y: float, z: float) -> None:
        """
        Build a quaternion from its four components.

        Parameters
        ----------
        w : float
            Scalar part.
        x, y, z : float
            Vector part.
        """
        self._q = np.array([w, x, y, z], dtype=QUATERNION_DTYPE)

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @staticmethod
    def from_components(w: float, x: float, y: float, z: float) -> 'Quaternion':
        """Create a quaternion from four explicit scalars."""
        return Quaternion(w, x, y, z)

    @staticmethod
    def from_vector(v: ArrayLike) -> 'Quaternion':
        """
        Embed a 3-vector as the pure quaternion [0, v_x, v_y, v_z].

        Parameters
        ----------
        v : array_like
            3-element vector.

        Returns
        -------
        Quaternion
            Pure quaternion with zero scalar part.

        Raises
        ------
        ValueError
            If v does not have exactly 3 components.
        """
        v = np.asarray(v, dtype=QUATERNION_DTYPE)

        if v.shape != (VECTOR_SIZE,):
            raise ValueError(
                f"Vector must have exactly {VECTOR_SIZE} components, "
                f"got shape {v.shape}"
            )

        return Quaternion(_ZERO, v[0], v[1], v[2])

    @staticmethod
    def from_raw(components: ArrayLike) -> 'Quaternion':
        """
        Create a quaternion from a raw [w, x, y, z] container.

        Raises
        ------
        ValueError
            If components does not have exactly 4 entries.
        """
        q = np.asarray(components, dtype=QUATERNION_DTYPE)

        if q.shape != (QUATERNION_SIZE,):
            raise ValueError(
                f"Quaternion must have exactly {QUATERNION_SIZE} components, "
                f"got shape {q.shape}"
            )

        return Quaternion(q[0], q[1], q[2], q[3])

    @staticmethod
    def identity() -> 'Quaternion':
        """
        Create the identity quaternion [1, 0, 0, 0].

        The identity is the multiplicative neutral element and represents
        zero rotation.
        """
        return Quaternion(*IDENTITY_COMPONENTS)

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    @property
    def w(self) -> np.float32:
        """Scalar (real) part of the quaternion."""
        return self._q[0]

    @property
    def x(self) -> np.float32:
        """First imaginary component (i-axis)."""
        return self._q[1]

    @property
    def y(self) -> np.float32:
        """Second imaginary component (j-axis)."""
        return self._q[2]

    @property
    def z(self) -> np.float32:
        """Third imaginary component (k-axis)."""
        return self._q[3]

    @property
    def scalar(self) -> np.float32:
        """Scalar part of the quaternion (alias for w)."""
        return self.w

    @property
    def vector(self) -> np.ndarray:
        """
        Vector (imaginary) part as a new 3-element array [x, y, z].

        The returned array does not share memory with the quaternion.
        """
        return self._q[1:4].copy()

    @property
    def components(self) -> np.ndarray:
        """Copy of the full [w, x, y, z] array."""
        return self._q.copy()

    def to_vector(self) -> np.ndarray:
        """Same as the vector property; pairs with from_vector()."""
        return self.vector

    def into_raw(self) -> np.ndarray:
        """
        Return the [w, x, y, z] container.

        The caller owns the returned array; later changes to either side
        are not visible to the other.
        """
        return self._q.copy()

    def to_array(self) -> np.ndarray:
        """Alias for into_raw()."""
        return self.into_raw()

    def copy(self) -> 'Quaternion':
        """Return an independent copy of this quaternion."""
        return Quaternion.from_raw(self._q)

    # =========================================================================
    # NORM AND NORMALIZATION
    # =========================================================================

    @property
    def sum_of_squares(self) -> np.float32:
        """Squared norm w^2 + x^2 + y^2 + z^2 (dot product with itself)."""
        return self._q.dot(self._q)

    @property
    def norm(self) -> np.float32:
        """Euclidean norm sqrt(w^2 + x^2 + y^2 + z^2)."""
        return np.sqrt(self.sum_of_squares)

    @property
    def magnitude(self) -> np.float32:
        """Alias for norm."""
        return self.norm

    def is_unit(self) -> bool:
        """
        Check whether the quaternion has unit length.

        The tolerance is float32 machine epsilon applied to the squared
        norm: |1 - (w^2 + x^2 + y^2 + z^2)| < eps. This is much tighter than
        the drift accumulated by composing rotations, and a freshly
        normalized quaternion may still fail it.

        Returns
        -------
        bool
            True if the squared norm is within float32 epsilon of 1.
        """
        return bool(abs(_ONE - self.sum_of_squares) < FLOAT32_EPSILON)

    def normalize(self) -> None:
        """
        Scale this quaternion to unit length in place.

        Does nothing when the quaternion already passes is_unit(). The zero
        quaternion has no direction and is left unchanged, so normalizing
        it yields [0, 0, 0, 0] rather than NaN.
        """
        if self.is_unit():
            return

        n = self.norm
        if n > _ZERO:
            self._q /= n
        else:
            logger.debug("Normalize called on zero quaternion; left unchanged")

    def normalized(self) -> 'Quaternion':
        """Return a normalized copy without modifying this quaternion."""
        quat = self.copy()
        quat.normalize()
        return quat

    def unit(self) -> 'Quaternion':
        """Alias for normalized()."""
        return self.normalized()

    # =========================================================================
    # QUATERNION ARITHMETIC
    # =========================================================================

    def conjugate(self) -> 'Quaternion':
        """
        Return the conjugate [w, -x, -y, -z].

        For unit quaternions the conjugate is the reverse rotation.
        """
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def inverse(self) -> 'Quaternion':
        """
        Return the multiplicative inverse q^{-1} = q* / |q|^2.

        The general formula is used even for unit quaternions, where it
        reduces to the conjugate.

        Raises
        ------
        ValueError
            If the quaternion is zero, which has no inverse.
        """
        s = self.sum_of_squares

        if not s > _ZERO:
            raise ValueError(
                f"Cannot invert zero quaternion (sum of squares = {s:.2e})"
            )

        conj = self.conjugate()
        conj._q /= s
        return conj

    def _left_matrix(self) -> np.ndarray:
        """
        4x4 left-multiplication matrix Q_L of this quaternion.

        For any quaternion p, Q_L @ p.components equals the Hamilton
        product self * p:

            | w  -x  -y  -z |
            | x   w  -z   y |
            | y   z   w  -x |
            | z  -y   x   w |
        """
        w, x, y, z = self._q
        return np.array([
            [w, -x, -y, -z],
            [x,  w, -z,  y],
            [y,  z,  w, -x],
            [z, -y,  x,  w],
        ], dtype=QUATERNION_DTYPE)

    def multiply(self, other: 'Quaternion') -> 'Quaternion':
        """
        Hamilton product self * other.

        Not commutative: q1 * q2 != q2 * q1 in general. As a rotation, the
        product applies other first and then self.

        Parameters
        ----------
        other : Quaternion
            Right-hand operand.

        Returns
        -------
        Quaternion
            The product, without any normalization.

        Raises
        ------
        TypeError
            If other is not a Quaternion.
        """
        if not isinstance(other, Quaternion):
            raise TypeError(
                f"Hamilton product requires a Quaternion, got {type(other).__name__}"
            )

        return Quaternion.from_raw(self._left_matrix() @ other._q)

    # =========================================================================
    # ROTATION
    # =========================================================================

    def rotate_vector(self, v: ArrayLike) -> np.ndarray:
        """
        Rotate a 3D vector with the sandwich product (q * v_pure) * q*.

        Only a unit quaternion gives a pure rotation. A non-unit quaternion
        rotates and scales the vector by |q|^2; normalize first when that
        is not wanted.

        Parameters
        ----------
        v : array_like
            3-element vector to rotate.

        Returns
        -------
        np.ndarray
            Rotated float32 vector of shape (3,).

        Raises
        ------
        ValueError
            If v does not have exactly 3 components.
        """
        qv = Quaternion.from_vector(v)
        rotated = (self * qv) * self.conjugate()
        return rotated.to_vector()

    # =========================================================================
    # ORIENTATION EXTRACTION
    # =========================================================================

    def taitbryan(self) -> np.ndarray:
        """
        Extract Tait-Bryan angles as [yaw, pitch, roll] in radians.

            pitch = arcsin(2*(w*y - x*z))
            yaw   = atan2(2*(y*z + w*x), 1 - 2*(x^2 + y^2))
            roll  = atan2(2*(x*y + w*z), 1 - 2*(y^2 + z^2))

        The arcsin argument is not clamped. When drift pushes it outside
        [-1, 1] the pitch is NaN. Near pitch = +/-90 degrees (gimbal lock)
        yaw and roll are ill-conditioned but remain finite.

        Returns
        -------
        np.ndarray
            float32 array [yaw, pitch, roll].
        """
        w, x, y, z = self._q

        with np.errstate(invalid='ignore'):
            pitch = np.arcsin(_TWO * (w * y - x * z))

        yaw = np.arctan2(_TWO * (y * z + w * x), _ONE - _TWO * (x * x + y * y))
        roll = np.arctan2(_TWO * (x * y + w * z), _ONE - _TWO * (y * y + z * z))

        if not np.isfinite(pitch):
            logger.debug("Pitch out of arcsin domain for %r", self)

        return np.array([yaw, pitch, roll], dtype=QUATERNION_DTYPE)

    def taitbryan_degrees(self) -> np.ndarray:
        """Tait-Bryan angles [yaw, pitch, roll] in degrees."""
        return self.taitbryan() * QUATERNION_DTYPE(RAD2DEG)

    def as_attitude_string(self) -> str:
        """
        Format the orientation as yaw/pitch/roll in degrees.

        Useful for logging and debugging output.
        """
        yaw, pitch, roll = self.taitbryan_degrees()
        return (f"Yaw={yaw:+7.2f} deg, "
                f"Pitch={pitch:+7.2f} deg, "
                f"Roll={roll:+7.2f} deg")

    # =========================================================================
    # OPERATOR OVERLOADS
    # =========================================================================

    def __mul__(self, other: 'Quaternion') -> 'Quaternion':
        """Quaternion * Quaternion -> Hamilton product."""
        if isinstance(other, Quaternion):
            return self.multiply(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        """
        Exact component-wise equality.

        No tolerance and no q/-q folding: two quaternions describing the
        same rotation with opposite signs compare unequal.
        """
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(np.array_equal(self._q, other._q))

    def __repr__(self) -> str:
        return (f"Quaternion(w={self.w:+.8f}, x={self.x:+.8f}, "
                f"y={self.y:+.8f}, z={self.z:+.8f})")
