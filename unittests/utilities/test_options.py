from dataclasses import dataclass, field
from unittest import TestCase

from orientlib.utilities.mixin_classes import AttributePrinting, UserOptionConfigured
from orientlib.utilities.options import UserOptions


@dataclass
class ScalerOptions(UserOptions):

    factor: float = 2.0

    offsets: list = field(default_factory=lambda: [1, 2])

    name: str = 'scaler'

    def override_options(self) -> None:
        self.name = self.name.lower()


class Scaler(UserOptionConfigured[ScalerOptions], ScalerOptions):

    def __init__(self, options: ScalerOptions | None = None):
        super().__init__(ScalerOptions, options=options)


class Target:
    pass


class TestUserOptions(TestCase):

    def test_options_dict(self):

        options = ScalerOptions(factor=3.0, name='LOUD')

        self.assertEqual(options.options_dict, {'factor': 3.0, 'offsets': [1, 2], 'name': 'loud'})

    def test_apply_options(self):

        target = Target()

        ScalerOptions(factor=4.0).apply_options(target)

        self.assertEqual(target.factor, 4.0)
        self.assertEqual(target.offsets, [1, 2])
        self.assertEqual(target.name, 'scaler')


class TestUserOptionConfigured(TestCase):

    def test_defaults(self):

        scaler = Scaler()

        self.assertEqual(scaler.factor, 2.0)
        self.assertEqual(scaler.original_options, ScalerOptions())

    def test_options(self):

        scaler = Scaler(ScalerOptions(factor=5.0, name='Big'))

        self.assertEqual(scaler.factor, 5.0)
        self.assertEqual(scaler.name, 'big')

    def test_reset_settings(self):

        options = ScalerOptions(factor=5.0)

        scaler = Scaler(options)

        scaler.factor = 7.0
        scaler.offsets.append(3)

        options.factor = 9.0

        scaler.reset_settings()

        self.assertEqual(scaler.factor, 5.0)
        self.assertEqual(scaler.original_options.factor, 5.0)
        self.assertEqual(scaler.original_options.offsets, [1, 2])

    def test_original_options_is_a_copy(self):

        options = ScalerOptions()

        self.assertIsNot(Scaler(options).original_options, options)


class Point(AttributePrinting):

    _printing_exclude = ('label',)

    def __init__(self, x, label):
        self._x = x
        self._hidden = 'secret'
        self.color = 'red'
        self.label = label

    @property
    def x(self):
        return self._x


class TestAttributePrinting(TestCase):

    def test_repr(self):

        self.assertEqual(repr(Point(1.5, 'a')), "Point(x=1.5, color='red')")

    def test_str(self):

        self.assertEqual(str(Point(1.5, 'a')), 'Point(x=1.5, color=red)')
