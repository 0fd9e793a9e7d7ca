from unittest import TestCase

import numpy as np

from orientlib import AxisAngle, Euler, Mat3, Quat, Vec3
from orientlib.core import rotmat_to_euler


SQRT2D2 = np.sqrt(2) / 2


class TestQuatBasics(TestCase):

    def test_defaults(self):

        self.assertEqual(Quat(), Quat(0, 0, 0, 1))
        self.assertEqual(Quat.identity(), Quat(0, 0, 0, 1))

    def test_components(self):

        q = Quat(1, 2, 3, 4)

        self.assertEqual((q.x, q.y, q.z, q.w), (1, 2, 3, 4))
        self.assertEqual(q.length_sq, 30)
        self.assertAlmostEqual(q.length, np.sqrt(30))
        self.assertEqual(q.to_vec3(), Vec3(1, 2, 3))
        self.assertEqual(q.dot(Quat(1, 1, 1, 1)), 10)

    def test_equality(self):

        self.assertEqual(Quat(1, 2, 3, 4), Quat(1, 2, 3, 4))
        self.assertNotEqual(Quat(0, 0, 0, 1), Quat(0, 0, 0, -1))
        self.assertEqual(hash(Quat(1, 2, 3, 4)), hash(Quat(1, 2, 3, 4)))

        self.assertTrue(Quat(0, 0, 0, 1).equals(Quat(1e-11, 0, 0, 1)))
        self.assertFalse(Quat(0, 0, 0, 1).equals(Quat(1e-9, 0, 0, 1)))

        # the same rotation, but a different quaternion
        self.assertFalse(Quat(0, 0, 0, 1).equals(Quat(0, 0, 0, -1)))

    def test_conj(self):

        self.assertEqual(Quat(1, 2, 3, 4).conj(), Quat(-1, -2, -3, 4))

    def test_scale(self):

        self.assertEqual(Quat(1, 2, 3, 4).scale(-1), Quat(-1, -2, -3, -4))


class TestQuatAlgebra(TestCase):

    def test_mul_permul(self):

        i = Quat(1, 0, 0, 0)
        j = Quat(0, 1, 0, 0)

        self.assertEqual(i.mul(j), Quat(0, 0, 1, 0))
        self.assertEqual(i.permul(j), Quat(0, 0, -1, 0))
        self.assertEqual(i * j, i.mul(j))

        with self.assertRaises(TypeError):

            i * 2

    def test_composition(self):

        q1 = Quat(0.1, 0.2, -0.3, 0.9).normalize()
        q2 = Quat(-0.4, 0.1, 0.2, 0.6).normalize()
        v = Vec3(0.5, -1, 2)

        self.assertTrue((q1 * q2).rotate_vec3(v).equals(q1.rotate_vec3(q2.rotate_vec3(v))))

        self.assertTrue((q1 * q1.conj()).equals(Quat.identity()))

    def test_normalize(self):

        self.assertTrue(Quat(0, 0, 3, 4).normalize().equals(Quat(0, 0, 0.6, 0.8)))

        q = Quat(0.3, -0.2, 0.9, 0.1).normalize()

        self.assertAlmostEqual(q.length, 1)
        self.assertTrue(q.normalize().equals(q, 1e-15))

        self.assertEqual(Quat(0, 0, 0, 0).normalize(), Quat.identity())
        self.assertEqual(Quat(0, 0, 1e-5, 0).normalize(precision=1e-4), Quat.identity())

    def test_rotate_vec3(self):

        q = Quat(0, 0, SQRT2D2, SQRT2D2)

        self.assertTrue(q.rotate_vec3(Vec3(1, 0, 0)).equals(Vec3(0, 1, 0)))

        self.assertEqual(Quat.identity().rotate_vec3(Vec3(1, 2, 3)), Vec3(1, 2, 3))


class TestQuatInterpolation(TestCase):

    def test_slerp(self):

        q0 = Quat.identity()
        q1 = Quat.from_axis_angle(AxisAngle(Vec3(0, 0, 1), np.pi/2))

        self.assertEqual(q0.slerp(q1, 0), q0)
        self.assertEqual(q0.slerp(q1, 1), q1)

        self.assertTrue(q0.slerp(q1, 0.5).equals(Quat.from_axis_angle(AxisAngle(Vec3(0, 0, 1), np.pi/4))))

        # the short way around
        self.assertTrue(q0.slerp(q1.scale(-1), 0.5).equals(Quat.from_axis_angle(AxisAngle(Vec3(0, 0, 1), np.pi/4))))

    def test_nlerp(self):

        q0 = Quat.identity()
        q1 = Quat(0.5, 0.5, 0.5, 0.5)

        expected = Quat(0.5, 0.5, 0.5, 1.5).normalize()

        self.assertTrue(q0.nlerp(q1, 0.5).equals(expected))


class TestQuatConversions(TestCase):

    def test_mat3(self):

        q = Quat(0.2, -0.4, 0.1, 0.7).normalize()

        result = Quat.from_mat3(q.to_mat3())

        self.assertTrue(result.equals(q) or result.equals(q.scale(-1)))

        self.assertEqual(Quat.identity().to_mat3(), Mat3.identity())

    def test_euler(self):

        for order in Euler.Orders:

            euler = Euler(0.4, -0.2, 1.1, order)

            with self.subTest(order=order):

                self.assertTrue(Quat.from_euler(euler).to_mat3().equals(euler.to_mat3()))

        q = Quat(0.2, -0.4, 0.1, 0.7).normalize()

        euler = q.to_euler()

        self.assertIs(euler.order, Euler.Orders.XYZ)

        np.testing.assert_allclose(euler.to_array(), rotmat_to_euler(q.to_mat3().to_array()))

    def test_axis_angle(self):

        q = Quat.from_axis_angle(AxisAngle(Vec3(1, 0, 0), np.pi))

        self.assertTrue(q.equals(Quat(1, 0, 0, 0)))

        axis_angle = Quat.identity().to_axis_angle()

        self.assertEqual(axis_angle.axis, Vec3(1, 0, 0))
        self.assertEqual(axis_angle.angle, 0)

        axis_angle = Quat(0, 0, SQRT2D2, SQRT2D2).to_axis_angle()

        self.assertTrue(axis_angle.axis.equals(Vec3(0, 0, 1)))
        self.assertAlmostEqual(axis_angle.angle, np.pi/2)

    def test_from_two_vectors(self):

        u = Vec3(1, 2, -1).normalize()

        self.assertEqual(Quat.from_two_vectors(u, u), Quat.identity())

        q = Quat.from_two_vectors(u, u.negate())

        self.assertEqual(q.w, 0)
        self.assertTrue(q.to_vec3().orthogonal_to(u))
        self.assertTrue(q.rotate_vec3(u).equals(u.negate()))

        v = Vec3(0, -3, 4).normalize()

        self.assertTrue(Quat.from_two_vectors(u, v).rotate_vec3(u).equals(v))
