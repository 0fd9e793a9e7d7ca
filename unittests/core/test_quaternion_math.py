from datetime import datetime, timedelta

from unittest import TestCase

import numpy as np

from scipy.spatial.transform import Rotation

from orientlib import core


SQRT2D2 = np.sqrt(2) / 2


class TestQuaternionNormalize(TestCase):

    def test_quaternion_normalize(self):

        np.testing.assert_allclose(core.quaternion_normalize([1, 2, 3, 4]), np.array([1, 2, 3, 4]) / np.sqrt(30))

        # the sign is kept
        np.testing.assert_allclose(core.quaternion_normalize([0, 0, 0, -2]), [0, 0, 0, -1])

    def test_idempotent(self):

        q = core.quaternion_normalize([0.3, -0.2, 0.9, 0.1])

        np.testing.assert_allclose(core.quaternion_normalize(q), q, rtol=0, atol=1e-15)

    def test_degenerate(self):

        with self.assertLogs('orientlib.core.quaternion_math', level='DEBUG'):
            q = core.quaternion_normalize([0, 0, 0, 0])

        np.testing.assert_array_equal(q, [0, 0, 0, 1])

        np.testing.assert_array_equal(core.quaternion_normalize([1e-12, 0, 0, 0]), [0, 0, 0, 1])

    def test_vectorized(self):

        quaternions = np.array([[2, 0], [0, 0], [0, 0], [0, 0]])

        np.testing.assert_array_equal(core.quaternion_normalize(quaternions), [[1, 0], [0, 0], [0, 0], [0, 1]])

        # the input is not modified
        np.testing.assert_array_equal(quaternions, [[2, 0], [0, 0], [0, 0], [0, 0]])


class TestQuaternionConjugate(TestCase):

    def test_quaternion_conjugate(self):

        np.testing.assert_array_equal(core.quaternion_conjugate([1, 2, 3, 4]), [-1, -2, -3, 4])

        np.testing.assert_array_equal(core.quaternion_conjugate([[1, 5], [2, 6], [3, 7], [4, 8]]),
                                      [[-1, -5], [-2, -6], [-3, -7], [4, 8]])

    def test_reverses_rotation(self):

        q = core.quaternion_normalize([0.3, -0.2, 0.9, 0.1])

        np.testing.assert_allclose(core.quaternion_multiplication(q, core.quaternion_conjugate(q)), [0, 0, 0, 1],
                                   atol=1e-15)


class TestQuaternionDot(TestCase):

    def test_quaternion_dot(self):

        self.assertEqual(core.quaternion_dot([1, 2, 3, 4], [5, 6, 7, 8]), 70)

        np.testing.assert_array_equal(core.quaternion_dot([[1, 0], [0, 1], [0, 0], [0, 0]],
                                                          [[1, 1], [0, 0], [0, 0], [0, 0]]), [1, 0])


class TestQuaternionMultiplication(TestCase):

    def test_quaternion_multiplication(self):

        np.testing.assert_array_equal(core.quaternion_multiplication([1, 0, 0, 0], [0, 1, 0, 0]), [0, 0, 1, 0])

        qm = core.quaternion_multiplication([[1], [0], [0], [0]], [[0], [1], [0], [0]])

        np.testing.assert_array_equal(qm, [[0], [0], [1], [0]])

        qm = core.quaternion_multiplication([[1, 0], [0, 1], [0, 0], [0, 0]], [[0, 0], [1, 1], [0, 0], [0, 0]])

        np.testing.assert_array_equal(np.abs(qm), [[0, 0], [0, 0], [1, 0], [0, 1]])

        qm = core.quaternion_multiplication([SQRT2D2, 0, 0, SQRT2D2], [0, SQRT2D2, 0, SQRT2D2])

        np.testing.assert_array_almost_equal(qm, [0.5, 0.5, 0.5, 0.5])

    def test_matches_rotation_composition(self):

        rng = np.random.default_rng(21)

        for _ in range(10):

            q1 = core.quaternion_normalize(rng.normal(size=4))
            q2 = core.quaternion_normalize(rng.normal(size=4))

            with self.subTest(q1=q1, q2=q2):

                np.testing.assert_allclose(core.quaternion_to_rotmat(core.quaternion_multiplication(q1, q2)),
                                           core.quaternion_to_rotmat(q1) @ core.quaternion_to_rotmat(q2),
                                           atol=1e-14)

                expected = (Rotation.from_quat(q1) * Rotation.from_quat(q2)).as_matrix()

                np.testing.assert_allclose(core.quaternion_to_rotmat(core.quaternion_multiplication(q1, q2)),
                                           expected, atol=1e-14)


class TestRotateVector(TestCase):

    def test_rotate_vector(self):

        np.testing.assert_allclose(core.rotate_vector([0, 0, SQRT2D2, SQRT2D2], [1, 0, 0]), [0, 1, 0], atol=1e-15)

        np.testing.assert_allclose(core.rotate_vector([0, 0, 0, 1], [1, 2, 3]), [1, 2, 3])

    def test_matches_rotmat(self):

        rng = np.random.default_rng(2)

        q = core.quaternion_normalize(rng.normal(size=4))
        vectors = rng.normal(size=(3, 5))

        np.testing.assert_allclose(core.rotate_vector(q, vectors), core.quaternion_to_rotmat(q) @ vectors,
                                   atol=1e-14)


class TestNLERP(TestCase):

    def test_nlerp(self):

        q0 = [0, 0, 0, 1]
        q1 = [0.5, 0.5, 0.5, 0.5]

        np.testing.assert_allclose(core.nlerp(q0, q1, 0), q0)

        np.testing.assert_allclose(core.nlerp(q0, q1, 1), q1)

        qtrue = (np.array(q0) + np.array(q1)) / 2
        qtrue /= np.linalg.norm(qtrue)

        np.testing.assert_allclose(core.nlerp(q0, q1, 0.5), qtrue)

        qtrue = np.array(q0) * (1 - 0.25) + np.array(q1) * 0.25
        qtrue /= np.linalg.norm(qtrue)

        np.testing.assert_allclose(core.nlerp(q0, q1, 0.25), qtrue)

    def test_times(self):

        q0 = [0, 0, 0, 1]
        q1 = [0.5, 0.5, 0.5, 0.5]

        np.testing.assert_allclose(core.nlerp(q0, q1, 2.5, 2, 4), core.nlerp(q0, q1, 0.25))

        t0 = datetime(2020, 1, 1)

        np.testing.assert_allclose(core.nlerp(q0, q1, t0 + timedelta(hours=6), t0, t0 + timedelta(days=1)),
                                   core.nlerp(q0, q1, 0.25))

    def test_collapse(self):

        np.testing.assert_array_equal(core.nlerp([0, 0, 0, 1], [0, 0, 0, -1], 0.5), [0, 0, 0, 1])


class TestSLERP(TestCase):

    def test_slerp(self):

        q0 = [0, 0, 0, 1]
        q1 = [0.5, 0.5, 0.5, 0.5]

        np.testing.assert_array_equal(core.slerp(q0, q1, 0), q0)

        np.testing.assert_array_equal(core.slerp(q0, q1, 1), q1)

        qtrue = (np.array(q0) + np.array(q1)) / 2
        qtrue /= np.linalg.norm(qtrue)

        np.testing.assert_allclose(core.slerp(q0, q1, 0.5), qtrue)

        qtrue = (np.array(q0) + qtrue) / 2
        qtrue /= np.linalg.norm(qtrue)

        np.testing.assert_allclose(core.slerp(q0, q1, 0.25), qtrue)

        # comes from ODTBX matlab function
        qtrue = [0.424985851398278, 0.424985851398278, 0.424985851398278, 0.676875969682661]

        np.testing.assert_allclose(core.slerp(q0, q1, 0.79), qtrue)

        q0 = np.array([0.23, 0.45, 0.67, 0.2])
        q0 /= np.linalg.norm(q0)
        q1 = np.array([-0.3, 0.2, 0.6, 0.33])
        q1 /= np.linalg.norm(q1)

        np.testing.assert_array_equal(core.slerp(q0, q1, 0), q0)

        np.testing.assert_array_equal(core.slerp(q0, q1, 1), q1)

        qtrue = (q0 + q1) / 2
        qtrue /= np.linalg.norm(qtrue)

        np.testing.assert_allclose(core.slerp(q0, q1, 0.5), qtrue)

        # comes from ODTBX matlab function
        qtrue = [-0.256224563175732, 0.331694624881600, 0.813762532744541, 0.402639031082742]

        np.testing.assert_allclose(core.slerp(q0, q1, 0.79), qtrue)

    def test_boundaries_are_copies(self):

        q0 = np.array([0, 0, 0, 1.0])
        q1 = np.array([0.5, 0.5, 0.5, 0.5])

        self.assertIsNot(core.slerp(q0, q1, 0), q0)
        self.assertIsNot(core.slerp(q0, q1, 1), q1)

    def test_shortest_path(self):

        q0 = np.array([0, 0, 0, 1.0])
        q1 = core.axis_angle_to_quaternion([0, 0, 1], np.pi/2)

        np.testing.assert_allclose(core.slerp(q0, -q1, 0.5), core.axis_angle_to_quaternion([0, 0, 1], np.pi/4))

        # q and -q are the same rotation
        np.testing.assert_allclose(core.slerp(q1, -q1, 0.5), q1)

    def test_nearly_parallel(self):

        q0 = np.array([0, 0, 0, 1.0])

        w = np.nextafter(1.0, 0.0)
        q1 = np.array([np.sqrt(1 - w * w), 0, 0, w])

        with self.assertLogs('orientlib.core.quaternion_math', level='DEBUG'):
            qt = core.slerp(q0, q1, 0.3)

        np.testing.assert_allclose(qt, core.nlerp(q0, q1, 0.3))

    def test_times(self):

        q0 = [0, 0, 0, 1]
        q1 = [0.5, 0.5, 0.5, 0.5]

        np.testing.assert_allclose(core.slerp(q0, q1, 15, 10, 20), core.slerp(q0, q1, 0.5))

        np.testing.assert_allclose(core.slerp(q0, q1, datetime(2020, 1, 1, 12), datetime(2020, 1, 1),
                                              datetime(2020, 1, 2)),
                                   core.slerp(q0, q1, 0.5))

    def test_bad_times(self):

        with self.assertRaises(TypeError):

            core.slerp([0, 0, 0, 1], [0.5, 0.5, 0.5, 0.5], 'noon', 0, 1)

        with self.assertRaises(TypeError):

            core.nlerp([0, 0, 0, 1], [0.5, 0.5, 0.5, 0.5], datetime(2020, 1, 1), 0, 1)


class TestQuaternionFromTwoVectors(TestCase):

    def test_same_vector(self):

        np.testing.assert_array_equal(core.quaternion_from_two_vectors([0, 0, 1], [0, 0, 1]), [0, 0, 0, 1])

    def test_opposite_vectors(self):

        for u in [[1, 0, 0], [0, 0, 1], [0, 1, 0], np.array([1, -2, 0.5]) / np.sqrt(5.25)]:

            u = np.asarray(u, dtype=np.float64)

            with self.subTest(u=u):

                with self.assertLogs('orientlib.core.quaternion_math', level='DEBUG'):
                    q = core.quaternion_from_two_vectors(u, -u)

                self.assertEqual(q[-1], 0)

                self.assertAlmostEqual(float(q[:3] @ u), 0)

                np.testing.assert_allclose(core.rotate_vector(q, u), -u, atol=1e-14)

    def test_quaternion_from_two_vectors(self):

        q = core.quaternion_from_two_vectors([1, 0, 0], [0, 1, 0])

        np.testing.assert_allclose(q, [0, 0, SQRT2D2, SQRT2D2])

        rng = np.random.default_rng(17)

        for _ in range(10):

            u = rng.normal(size=3)
            u /= np.linalg.norm(u)
            v = rng.normal(size=3)
            v /= np.linalg.norm(v)

            with self.subTest(u=u, v=v):

                q = core.quaternion_from_two_vectors(u, v)

                self.assertAlmostEqual(np.linalg.norm(q), 1)

                np.testing.assert_allclose(core.rotate_vector(q, u), v, atol=1e-12)
