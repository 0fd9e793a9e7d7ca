"""
This module defines the closed set of Euler angle orders understood by orientlib.
"""

from enum import Enum


__all__ = ['EulerOrder', 'coerce_euler_order']


class EulerOrder(Enum):
    """
    This enumeration provides the six Tait-Bryan axis orders that Euler angles can be expressed in.

    An order ``ABC`` corresponds to the rotation matrix :math:`\\mathbf{R}_A(a)\\mathbf{R}_B(b)\\mathbf{R}_C(c)`
    where :math:`\\mathbf{R}_i` is the elementary right handed rotation about axis :math:`i` (see :func:`.rot_x`,
    :func:`.rot_y`, :func:`.rot_z`).  The angles themselves are always stored per axis (x, y, z) regardless of the
    order.
    """

    XYZ = "XYZ"
    """
    R = Rx(x) Ry(y) Rz(z)
    """

    XZY = "XZY"
    """
    R = Rx(x) Rz(z) Ry(y)
    """

    YXZ = "YXZ"
    """
    R = Ry(y) Rx(x) Rz(z)
    """

    YZX = "YZX"
    """
    R = Ry(y) Rz(z) Rx(x)
    """

    ZXY = "ZXY"
    """
    R = Rz(z) Rx(x) Ry(y)
    """

    ZYX = "ZYX"
    """
    R = Rz(z) Ry(y) Rx(x)
    """


def coerce_euler_order(order: EulerOrder | str) -> EulerOrder:
    """
    Return the :class:`EulerOrder` member corresponding to `order`.

    Strings are matched case-insensitively against the member values.

    :param order: The order as an enumeration member or a string such as ``'xyz'``
    :return: The enumeration member
    :raises ValueError: If `order` does not name one of the six supported orders
    """

    if isinstance(order, EulerOrder):
        return order

    if isinstance(order, str) and order.upper() in EulerOrder.__members__:
        return EulerOrder[order.upper()]

    raise ValueError(f'Unknown Euler order {order!r}')
