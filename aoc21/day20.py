"""Day 20: enhancing an infinite image with a lookup algorithm."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_ALGO_LENGTH = 512


@dataclass(frozen=True, order=True)
class Pixel:
    y: int
    x: int


@dataclass(frozen=True)
class Image:
    """Lit pixels inside known bounds; everything outside has ``infinity_val``."""

    data: frozenset[Pixel]
    infinity_val: bool
    low: Pixel
    high: Pixel

    @classmethod
    def from_pixels(cls, pixels: Iterable[Pixel]) -> "Image":
        data = frozenset(pixels)
        if not data:
            raise ValueError("image has no lit pixels")
        low = Pixel(min(p.y for p in data), min(p.x for p in data))
        high = Pixel(max(p.y for p in data), max(p.x for p in data))
        return cls(data, False, low, high)

    def extend(self, pixels: Iterable[Pixel], change_infinity: bool) -> "Image":
        """The next image: bounds grow by one, the background may toggle."""
        return Image(
            frozenset(pixels),
            (not self.infinity_val) and change_infinity,
            Pixel(self.low.y - 1, self.low.x - 1),
            Pixel(self.high.y + 1, self.high.x + 1),
        )

    def iter_pixels(self) -> Iterator[Pixel]:
        """Every pixel of the bounds grown by one, row by row."""
        for y in range(self.low.y - 1, self.high.y + 2):
            for x in range(self.low.x - 1, self.high.x + 2):
                yield Pixel(y, x)

    def is_on(self, pixel: Pixel) -> bool:
        if not (
            self.low.y <= pixel.y <= self.high.y and self.low.x <= pixel.x <= self.high.x
        ):
            return self.infinity_val
        return pixel in self.data

    def get_box(self, pixel: Pixel) -> int:
        """The 9-bit number formed by the 3x3 box around ``pixel``."""
        value = 0
        for y in range(pixel.y - 1, pixel.y + 2):
            for x in range(pixel.x - 1, pixel.x + 2):
                value = (value << 1) | self.is_on(Pixel(y, x))
        return value

    def __str__(self) -> str:
        parts = []
        last_x, last_y = self.low.x, self.low.y
        for pixel in sorted(self.data):
            if pixel.y > last_y:
                parts.append("\n" * (pixel.y - last_y))
                last_x = self.low.x
            parts.append(" " * max(pixel.x - last_x, 0))
            parts.append("█")
            last_x, last_y = pixel.x + 1, pixel.y
        return "".join(parts)


@dataclass(frozen=True)
class ImageAlgo:
    algo: tuple[bool, ...]
    image: Image


def parse(text: str) -> ImageAlgo:
    algo_text, sep, image_text = text.partition("\n\n")
    if not sep:
        raise ValueError("Malformed input")
    algo = tuple(char == "#" for char in algo_text.strip())
    if len(algo) != _ALGO_LENGTH:
        raise ValueError(f"algorithm must have {_ALGO_LENGTH} entries, got {len(algo)}")
    if algo[0] and algo[-1]:
        raise ValueError("algorithm would output infinite value")
    pixels = [
        Pixel(y, x)
        for y, line in enumerate(image_text.splitlines())
        for x, char in enumerate(line)
        if char == "#"
    ]
    return ImageAlgo(algo, Image.from_pixels(pixels))


def enhance(data: ImageAlgo, steps: int) -> int:
    """Number of lit pixels after applying the algorithm ``steps`` times."""
    image = data.image
    for _ in range(steps):
        lit = [p for p in image.iter_pixels() if data.algo[image.get_box(p)]]
        image = image.extend(lit, data.algo[0])
    if image.infinity_val:
        raise ValueError("Return is ∞")
    return len(image.data)


def part_a(data: ImageAlgo) -> int:
    return enhance(data, 2)


def part_b(data: ImageAlgo) -> int:
    return enhance(data, 50)