from unittest import TestCase

import numpy as np

from orientlib import AxisAngle, Euler, EulerOrder, Mat3, Quat, Vec3
from orientlib.core import rot_axis


class TestEulerBasics(TestCase):

    def test_defaults(self):

        euler = Euler()

        self.assertEqual((euler.x, euler.y, euler.z), (0, 0, 0))
        self.assertIs(euler.order, EulerOrder.XYZ)

    def test_orders(self):

        self.assertIs(Euler(order='zyx').order, EulerOrder.ZYX)
        self.assertIs(Euler(order=Euler.Orders.YZX).order, EulerOrder.YZX)

        for order in ['XYX', 'xy', None]:

            with self.subTest(order=order):

                with self.assertRaises(ValueError):

                    Euler(0, 0, 0, order)

    def test_equality(self):

        self.assertEqual(Euler(1, 2, 3), Euler(1, 2, 3, 'xyz'))
        self.assertNotEqual(Euler(1, 2, 3), Euler(1, 2, 3, 'zyx'))
        self.assertEqual(hash(Euler(1, 2, 3)), hash(Euler(1.0, 2.0, 3.0)))

        self.assertTrue(Euler(1, 2, 3).equals(Euler(1, 2, 3 + 1e-11)))
        self.assertFalse(Euler(1, 2, 3).equals(Euler(1, 2, 3 + 1e-9)))
        self.assertFalse(Euler(1, 2, 3).equals(Euler(1, 2, 3, 'ZYX')))

    def test_with_order(self):

        euler = Euler(1, 2, 3).with_order('YXZ')

        self.assertEqual(euler, Euler(1, 2, 3, 'YXZ'))

    def test_containers(self):

        euler = Euler(1, 2, 3, 'ZYX')

        np.testing.assert_array_equal(euler.to_array(), [1, 2, 3])
        self.assertEqual(euler.to_list(), [1, 2, 3])
        self.assertEqual(euler.to_vec3(), Vec3(1, 2, 3))

        self.assertEqual(Euler.from_vec3(Vec3(1, 2, 3), 'ZYX'), euler)

    def test_repr(self):

        self.assertEqual(repr(Euler(1, 2, 3)), "Euler(x=1.0, y=2.0, z=3.0, order=<EulerOrder.XYZ: 'XYZ'>)")


class TestEulerConversions(TestCase):

    def test_to_mat3(self):

        for order in EulerOrder:

            euler = Euler(0.3, -0.7, 1.2, order)

            expected = np.eye(3)
            for axis in order.value.lower():
                expected = expected @ rot_axis(axis, getattr(euler, axis))

            with self.subTest(order=order):

                np.testing.assert_allclose(euler.to_mat3().to_array(), expected, atol=1e-14)

    def test_to_quat(self):

        for order in EulerOrder:

            euler = Euler(0.3, -0.7, 1.2, order)

            with self.subTest(order=order):

                self.assertTrue(euler.to_quat().to_mat3().equals(euler.to_mat3()))

    def test_from_mat3_round_trip(self):

        for order in EulerOrder:

            euler = Euler(-0.3, 0.7, 1.2, order)

            with self.subTest(order=order):

                self.assertTrue(Euler.from_mat3(euler.to_mat3(), order).equals(euler, 1e-9))

    def test_from_mat3_gimbal_lock(self):

        euler = Euler(0.3, np.pi/2, 0)

        result = Euler.from_mat3(euler.to_mat3())

        self.assertAlmostEqual(result.x, 0.3)
        self.assertAlmostEqual(result.y, np.pi/2)
        self.assertEqual(result.z, 0)

        self.assertTrue(result.to_mat3().equals(euler.to_mat3()))

        # only the sum of x and z is observable at the pole
        locked = Euler.from_mat3(Euler(0.1, np.pi/2, 0.2).to_mat3())

        self.assertTrue(locked.equals(result, 1e-9))

    def test_from_quat(self):

        q = Quat.from_euler(Euler(0.1, 0.2, 0.3))

        self.assertTrue(Euler.from_quat(q).equals(Euler(0.1, 0.2, 0.3)))

    def test_from_axis_angle(self):

        euler = Euler.from_axis_angle(AxisAngle(Vec3(0, 0, 1), 0.5))

        self.assertTrue(euler.equals(Euler(0, 0, 0.5)))

        self.assertTrue(Euler.from_axis_angle(AxisAngle(Vec3(0, 1, 0), -0.25)).to_mat3().equals(
            Mat3.rotation_y(-0.25)))
