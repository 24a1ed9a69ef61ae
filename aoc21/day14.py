"""Day 14: extended polymerization."""

from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass
class Polymerization:
    template: str
    rules: dict[str, str]


@dataclass
class Polymer:
    """A polymer kept as counts of adjacent element pairs plus its two ends."""

    ends: tuple[str, str]
    pairs: dict[str, int]

    @classmethod
    def from_template(cls, template: str) -> "Polymer":
        if not template:
            raise ValueError("empty polymer template")
        pairs = Counter(a + b for a, b in zip(template, template[1:]))
        return cls((template[0], template[-1]), dict(pairs))

    def step(self, rules: Mapping[str, str]) -> "Polymer":
        """Apply every insertion rule once; pairs without a rule vanish."""
        pairs: dict[str, int] = {}
        for source in sorted(rules):
            amount = self.pairs.get(source)
            if amount is None:
                continue
            inserted = rules[source]
            for pair in (source[0] + inserted, inserted + source[1]):
                pairs[pair] = pairs.get(pair, 0) + amount
        return Polymer(self.ends, pairs)

    def count_elements(self) -> dict[str, int]:
        counts = {end: 1 for end in self.ends}
        for pair, amount in self.pairs.items():
            for element in pair:
                counts[element] = counts.get(element, 0) + amount
        return {element: counts[element] // 2 for element in sorted(counts)}

    def __str__(self) -> str:
        return "Polymer\n" + "".join(
            f"{pair} -> {amount}\n" for pair, amount in sorted(self.pairs.items())
        )


def parse(text: str) -> Polymerization:
    template, sep, rule_text = text.partition("\n\n")
    if not sep:
        raise ValueError("Malformed input")
    rules = {}
    for line in rule_text.splitlines():
        source, arrow, target = line.partition(" -> ")
        if not arrow or len(source) != 2 or not target:
            raise ValueError(f"Malformed input: {line!r}")
        rules[source] = target[0]
    return Polymerization(template, rules)


def run(data: Polymerization, steps: int) -> int:
    """Most common minus least common element count after ``steps``."""
    polymer = Polymer.from_template(data.template)
    for _ in range(steps):
        polymer = polymer.step(data.rules)
    counts = polymer.count_elements().values()
    return max(counts) - min(counts)


def part_a(data: Polymerization) -> int:
    return run(data, 10)


def part_b(data: Polymerization) -> int:
    return run(data, 40)