import types

import numpy
import pytest

from cornerfilters import compat, feature_strength_map, gaussian_smoothing, structure_tensor


class TestPlainArrays:
    def test_gaussian_smoothing(self, rng):
        image = rng.uniform(0, 255, (12, 12)).astype(numpy.float32)
        numpy.testing.assert_array_equal(
            compat.gaussianSmoothing(image, 1.0), gaussian_smoothing(image, 1.0)
        )

    def test_window_size_is_window_ratio(self, rng):
        image = rng.uniform(0, 255, (12, 12)).astype(numpy.float32)
        numpy.testing.assert_array_equal(
            compat.gaussianSmoothing(image, 2.0, window_size=2.0),
            gaussian_smoothing(image, 2.0, window_ratio=2.0),
        )

    def test_structure_tensor_is_channel_last(self, rng):
        image = rng.uniform(0, 255, (12, 12)).astype(numpy.float32)
        res = compat.structureTensor(image, 1, searchMargin=1)
        assert res.shape == (12, 12, 4)
        numpy.testing.assert_array_equal(
            numpy.moveaxis(res, -1, 0), structure_tensor(image, 1, search_margin=1)
        )

    def test_feature_strength(self, square_image):
        numpy.testing.assert_array_equal(
            compat.featureStrength(square_image, 1, 2, 1),
            feature_strength_map(square_image, 1, 2, 1).strength,
        )

    def test_singleton_dimensions_rejected(self):
        with pytest.raises(AssertionError):
            compat.gaussianSmoothing(numpy.zeros((1, 12)), 1.0)

    def test_keeps_function_name(self):
        assert compat.gaussianSmoothing.__name__ == "gaussianSmoothing"


class _Tagged(numpy.ndarray):
    axistags = "yx"


def test_tagged_array_without_vigra(monkeypatch):
    monkeypatch.setattr(compat, "vigra", None)
    tagged = numpy.zeros((8, 8)).view(_Tagged)
    with pytest.raises(RuntimeError):
        compat.gaussianSmoothing(tagged, 1.0)


class _FakeVigraArray(numpy.ndarray):
    axistags = ()

    def squeeze(self):
        keep = [tag for tag, n in zip(self.axistags, self.shape) if n > 1]
        return _tagged_view(numpy.asarray(self).squeeze(), keep)

    def withAxes(self, axistags):
        data = numpy.asarray(self)
        present = [tag for tag in axistags if tag in self.axistags]
        data = numpy.transpose(data, [self.axistags.index(tag) for tag in present])
        for i, tag in enumerate(axistags):
            if tag not in self.axistags:
                data = numpy.expand_dims(data, i)
        return _tagged_view(data, axistags)


def _tagged_view(data, axistags):
    view = numpy.asarray(data).view(_FakeVigraArray)
    view.axistags = tuple(axistags)
    return view


@pytest.fixture
def fake_vigra(monkeypatch):
    module = types.SimpleNamespace(
        taggedView=_tagged_view, AxisInfo=types.SimpleNamespace(c="c")
    )
    monkeypatch.setattr(compat, "vigra", module)
    return module


class TestTaggedArrays:
    def test_gaussian_smoothing_keeps_tags(self, fake_vigra, rng):
        image = rng.uniform(0, 255, (12, 14, 1)).astype(numpy.float32)
        res = compat.gaussianSmoothing(_tagged_view(image, ("y", "x", "c")), 1.0)
        assert res.axistags == ("y", "x", "c")
        assert res.shape == (12, 14, 1)
        numpy.testing.assert_array_equal(res[..., 0], gaussian_smoothing(image[..., 0], 1.0))

    def test_structure_tensor_puts_channel_last(self, fake_vigra, rng):
        image = rng.uniform(0, 255, (12, 14, 1)).astype(numpy.float32)
        res = compat.structureTensor(_tagged_view(image, ("y", "x", "c")), 1, searchMargin=1)
        assert res.axistags == ("y", "x", "c")
        assert res.shape == (12, 14, 4)
        numpy.testing.assert_array_equal(
            numpy.moveaxis(numpy.asarray(res), -1, 0),
            structure_tensor(image[..., 0], 1, search_margin=1),
        )

