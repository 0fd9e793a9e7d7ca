from unittest import TestCase

import numpy as np

from orientlib import core


SRT3D2 = np.sqrt(3) / 2


class TestRotX(TestCase):

    def test_rot_x(self):

        angles = [np.pi/2, np.pi, np.pi/3, 0, -np.pi/2, -np.pi/3]

        mats = [[[1, 0, 0], [0, 0, -1], [0, 1, 0]],
                [[1, 0, 0], [0, -1, 0], [0, 0, -1]],
                [[1, 0, 0], [0, 0.5, -SRT3D2], [0, SRT3D2, 0.5]],
                [[1, 0, 0], [0, 1, 0], [0, 0, 1]],
                [[1, 0, 0], [0, 0, 1], [0, -1, 0]],
                [[1, 0, 0], [0, 0.5, SRT3D2], [0, -SRT3D2, 0.5]]]

        for angle, solu in zip(angles, mats):

            with self.subTest(angle=angle):

                np.testing.assert_almost_equal(core.rot_x(angle), solu)

    def test_vectorized(self):

        rmats = core.rot_x([0, np.pi/2, np.pi/3])

        self.assertEqual(rmats.shape, (3, 3, 3))

        np.testing.assert_almost_equal(rmats, [[[1, 0, 0], [0, 1, 0], [0, 0, 1]],
                                               [[1, 0, 0], [0, 0, -1], [0, 1, 0]],
                                               [[1, 0, 0], [0, 0.5, -SRT3D2], [0, SRT3D2, 0.5]]])


class TestRotY(TestCase):

    def test_rot_y(self):

        angles = [3*np.pi/2, np.pi, np.pi/2, np.pi/3, 0,
                  -3*np.pi/2, -np.pi, -np.pi/2, -np.pi/3,
                  [0, np.pi/2, np.pi/3],
                  [0, -np.pi/2, -np.pi/3]]

        mats = [[[0, 0, -1], [0, 1, 0], [1, 0, 0]],
                [[-1, 0, 0], [0, 1, 0], [0, 0, -1]],
                [[0, 0, 1], [0, 1, 0], [-1, 0, 0]],
                [[0.5, 0, SRT3D2], [0, 1, 0], [-SRT3D2, 0, 0.5]],
                [[1, 0, 0], [0, 1, 0], [0, 0, 1]],
                [[0, 0, 1], [0, 1, 0], [-1, 0, 0]],
                [[-1, 0, 0], [0, 1, 0], [0, 0, -1]],
                [[0, 0, -1], [0, 1, 0], [1, 0, 0]],
                [[0.5, 0, -SRT3D2], [0, 1, 0], [SRT3D2, 0, 0.5]],
                [[[1, 0, 0], [0, 1, 0], [0, 0, 1]],
                 [[0, 0, 1], [0, 1, 0], [-1, 0, 0]],
                 [[0.5, 0, SRT3D2], [0, 1, 0], [-SRT3D2, 0, 0.5]]],
                [[[1, 0, 0], [0, 1, 0], [0, 0, 1]],
                 [[0, 0, -1], [0, 1, 0], [1, 0, 0]],
                 [[0.5, 0, -SRT3D2], [0, 1, 0], [SRT3D2, 0, 0.5]]]
                ]

        for angle, solu in zip(angles, mats):

            with self.subTest(angle=angle):

                np.testing.assert_almost_equal(core.rot_y(angle), solu)


class TestRotZ(TestCase):

    def test_rot_z(self):

        angles = [3*np.pi/2, np.pi, np.pi/2, np.pi/3, 0, -np.pi/2, -np.pi/3]

        mats = [[[0, 1, 0], [-1, 0, 0], [0, 0, 1]],
                [[-1, 0, 0], [0, -1, 0], [0, 0, 1]],
                [[0, -1, 0], [1, 0, 0], [0, 0, 1]],
                [[0.5, -SRT3D2, 0], [SRT3D2, 0.5, 0], [0, 0, 1]],
                [[1, 0, 0], [0, 1, 0], [0, 0, 1]],
                [[0, 1, 0], [-1, 0, 0], [0, 0, 1]],
                [[0.5, SRT3D2, 0], [-SRT3D2, 0.5, 0], [0, 0, 1]]]

        for angle, solu in zip(angles, mats):

            with self.subTest(angle=angle):

                np.testing.assert_almost_equal(core.rot_z(angle), solu)

    def test_rotates_x_onto_y(self):

        np.testing.assert_almost_equal(core.rot_z(np.pi/2) @ [1, 0, 0], [0, 1, 0])


class TestRotAxis(TestCase):

    def test_named_axes(self):

        for name, func in [('x', core.rot_x), ('Y', core.rot_y), ('z', core.rot_z)]:

            with self.subTest(axis=name):

                np.testing.assert_array_equal(core.rot_axis(name, 0.3), func(0.3))

    def test_bad_axis(self):

        for name in ['w', 'xy', '']:

            with self.subTest(axis=name):

                with self.assertRaises(ValueError):

                    core.rot_axis(name, 0.3)


class TestSkew(TestCase):

    def test_skew(self):

        skew_mat = core.skew([1, 2, 3])

        np.testing.assert_array_equal(skew_mat, [[0, -3, 2], [3, 0, -1], [-2, 1, 0]])

        skew_mat = core.skew([[1, 2], [2, 3], [3, 4]])

        np.testing.assert_array_equal(skew_mat, [[[0, -3, 2], [3, 0, -1], [-2, 1, 0]],
                                                 [[0, -4, 3], [4, 0, -2], [-3, 2, 0]]])

    def test_cross_product(self):

        a = np.array([0.3, -1.2, 2.0])
        b = np.array([1.5, 0.25, -0.75])

        np.testing.assert_allclose(core.skew(a) @ b, np.cross(a, b))

    def test_bad_shape(self):

        with self.assertRaises(ValueError):

            core.skew([1, 2])
