"""Population density fields sampled by the road growth."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from cityroads.core.exceptions import ConfigurationError
from cityroads.core.geometry import Point, Rect


class DensityField:
    """
    Scalar population field over the plane.

    Subclasses implement ``sample``. Sampling must be a pure function of position
    and must never return a negative value.
    """

    def sample(self, x: float, y: float) -> float:
        raise NotImplementedError

    def sample_many(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        return np.array([self.sample(float(x), float(y)) for x, y in zip(xs, ys)])

    def population_for_road(self, point_a: Point, point_b: Point, samples: int = 3) -> float:
        """
        Mean density along a road.

        Args:
            point_a: Road start
            point_b: Road end
            samples: Number of evenly spaced samples, endpoints included

        Returns:
            Aggregate population weight of the road footprint
        """
        if samples <= 1:
            mid = ((point_a[0] + point_b[0]) / 2, (point_a[1] + point_b[1]) / 2)
            return max(0.0, float(self.sample(*mid)))

        t = np.linspace(0.0, 1.0, samples)
        xs = point_a[0] + (point_b[0] - point_a[0]) * t
        ys = point_a[1] + (point_b[1] - point_a[1]) * t
        values = np.clip(self.sample_many(xs, ys), 0.0, None)
        return float(values.mean())


class ConstantDensityField(DensityField):
    """Same density everywhere."""

    def __init__(self, value: float = 0.0):
        if value < 0:
            raise ConfigurationError("Density must not be negative")
        self.value = float(value)

    def sample(self, x: float, y: float) -> float:
        return self.value

    def sample_many(self, xs, ys):
        return np.full(len(xs), self.value)


class FunctionDensityField(DensityField):
    """Density given by a plain ``func(x, y) -> float``."""

    def __init__(self, func: Callable[[float, float], float]):
        self.func = func

    def sample(self, x: float, y: float) -> float:
        return max(0.0, float(self.func(x, y)))


class RadialDensityField(DensityField):
    """Gaussian population peak around a centre."""

    def __init__(self, center: Point = (0.0, 0.0), radius: float = 1000.0, peak: float = 1.0):
        if radius <= 0:
            raise ConfigurationError("Radius must be positive")
        self.center = center
        self.radius = radius
        self.peak = peak

    def sample(self, x: float, y: float) -> float:
        return float(self.sample_many(np.array([x]), np.array([y]))[0])

    def sample_many(self, xs, ys):
        d2 = (np.asarray(xs) - self.center[0]) ** 2 + (np.asarray(ys) - self.center[1]) ** 2
        return self.peak * np.exp(-d2 / (2.0 * self.radius**2))


class GridDensityField(DensityField):
    """
    Density stored as a 2D grid stretched over a rectangle.

    Row 0 of ``values`` is the bottom (miny) edge. Samples are bilinearly
    interpolated; positions outside the rectangle take the nearest edge value.
    """

    def __init__(self, values, bounds: Rect):
        grid = np.asarray(values, dtype=float)
        if grid.ndim != 2 or grid.shape[0] < 1 or grid.shape[1] < 1:
            raise ConfigurationError("Density grid must be a non-empty 2D array")
        if np.any(grid < 0):
            raise ConfigurationError("Density grid must not contain negative values")
        minx, miny, maxx, maxy = bounds
        if not (minx < maxx and miny < maxy):
            raise ConfigurationError(f"Density grid bounds are degenerate: {bounds}")
        self.values = grid
        self.bounds = bounds

    def sample(self, x: float, y: float) -> float:
        return float(self.sample_many(np.array([x]), np.array([y]))[0])

    def sample_many(self, xs, ys):
        rows, cols = self.values.shape
        minx, miny, maxx, maxy = self.bounds

        # Continuous cell coordinates, cell centres sit on integers
        u = (np.asarray(xs, dtype=float) - minx) / (maxx - minx) * cols - 0.5
        v = (np.asarray(ys, dtype=float) - miny) / (maxy - miny) * rows - 0.5
        u = np.clip(u, 0.0, cols - 1)
        v = np.clip(v, 0.0, rows - 1)

        c0 = np.floor(u).astype(int)
        r0 = np.floor(v).astype(int)
        c1 = np.minimum(c0 + 1, cols - 1)
        r1 = np.minimum(r0 + 1, rows - 1)
        fu = u - c0
        fv = v - r0

        bottom = self.values[r0, c0] * (1 - fu) + self.values[r0, c1] * fu
        top = self.values[r1, c0] * (1 - fu) + self.values[r1, c1] * fu
        return bottom * (1 - fv) + top * fv
