''' Source text -> program lines and label table '''

import logging as lg
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence

import temu.sasm.grammar as grammar
from temu.common.errors import UnresolvedTarget


@dataclass(frozen=True)
class Program:
    lines: Sequence[str] = ()
    labels: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> str:
        return self.lines[index]

    def resolve(self, target: str) -> int:
        if target in self.labels:
            return self.labels[target]

        address = grammar.parse_integer(target)

        if address is None:
            raise UnresolvedTarget(f'Invalid address or label: {target}')

        return address


def collect_labels(lines: Sequence[str]) -> dict[str, int]:
    labels: dict[str, int] = dict()

    for index, raw in enumerate(lines):
        text = raw.strip()

        if not grammar.is_label(text):
            continue

        name = grammar.label_name(text)

        if name in labels:
            lg.warning(f'Label {name} @ {labels[name]} redeclared @ {index}')

        labels[name] = index
        lg.debug(f'Label {name} @ {index}')

    return labels


def parse(source: str) -> Program:
    # Lines are kept verbatim, nothing is validated until execution
    lines = tuple(source.split('\n'))

    # Labels point at their own line
    labels = collect_labels(lines)

    return Program(lines, MappingProxyType(labels))
