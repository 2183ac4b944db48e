"""
Data model for Contest Sample Downloader

ContestIdentifier is a tagged value over the three AtCoder contest families.
The result records serialize to the ``contest.json`` layout::

    {"kind": {"ABC": 126},
     "problem": [{"diff": "a", "expected_in_out": [["3\\n5\\n", "8\\n"]]}]}
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class ContestKind(Enum):
    """Contest family; the value is the lowercase code used in URLs"""
    ABC = "abc"
    ARC = "arc"
    AGC = "agc"

    @property
    def tag(self) -> str:
        """Tag used for the ``kind`` field of the serialized contest"""
        return self.name


@dataclass(frozen=True)
class ContestIdentifier:
    """Identifies one contest, e.g. ABC 390."""

    kind: ContestKind
    number: int

    def __str__(self) -> str:
        return f"{self.kind.value}{self.number:03d}"

    @property
    def slug(self) -> str:
        """Contest path component, zero-padded to at least three digits"""
        return str(self)

    def to_dict(self) -> Dict[str, int]:
        return {self.kind.tag: self.number}

    @classmethod
    def from_dict(cls, data: Dict[str, int]) -> "ContestIdentifier":
        if len(data) != 1:
            raise ValueError(f"Expected a single contest tag, got: {data}")
        (tag, number), = data.items()
        try:
            kind = ContestKind[tag]
        except KeyError:
            raise ValueError(f"Unknown contest tag: {tag!r}") from None
        return cls(kind, int(number))


@dataclass(frozen=True)
class ProblemSpec:
    """A problem label within a contest"""

    contest: ContestIdentifier
    label: str
    url: str


@dataclass(frozen=True)
class SamplePair:
    input_: str
    output_: str

    def to_list(self) -> List[str]:
        return [self.input_, self.output_]


@dataclass
class ProblemResult:
    diff: str
    samples: List[SamplePair] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "diff": self.diff,
            "expected_in_out": [sample.to_list() for sample in self.samples],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProblemResult":
        return cls(
            diff=data["diff"],
            samples=[SamplePair(input_, output_) for input_, output_ in data["expected_in_out"]],
        )


@dataclass
class ContestResult:
    contest: ContestIdentifier
    problems: List[ProblemResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.contest.to_dict(),
            "problem": [problem.to_dict() for problem in self.problems],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContestResult":
        return cls(
            contest=ContestIdentifier.from_dict(data["kind"]),
            problems=[ProblemResult.from_dict(p) for p in data["problem"]],
        )
