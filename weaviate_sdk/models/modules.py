# weaviate_sdk/models/modules.py
# SPDX-License-Identifier: Apache-2.0
"""
text2vec-contextionary module models: concept lookups and custom concept
extensions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from weaviate_sdk.core.wire import (
    JSONObject,
    expect_object,
    opt_bool,
    opt_float,
    opt_float_list,
    opt_list,
    opt_str_list,
    req_str,
)


@dataclass(frozen=True)
class NearestNeighbor:
    word: str
    distance: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Any) -> "NearestNeighbor":
        data = expect_object(data, "NearestNeighbor")
        return cls(
            word=req_str(data, "word", "NearestNeighbor"),
            distance=opt_float(data, "distance", "NearestNeighbor"),
        )


def _neighbors(data: Any, key: str, what: str) -> Optional[List[NearestNeighbor]]:
    items = opt_list(data, key, what)
    if items is None:
        return None
    return [NearestNeighbor.from_dict(n) for n in items]


@dataclass(frozen=True)
class ConceptInfo:
    nearest_neighbors: List[NearestNeighbor] = field(default_factory=list)
    vector: List[float] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "ConceptInfo":
        what = "ConceptInfo"
        data = expect_object(data, what)
        return cls(
            nearest_neighbors=_neighbors(data, "nearestNeighbors", what) or [],
            vector=opt_float_list(data, "vector", what) or [],
        )


@dataclass(frozen=True)
class ConcatenatedWord:
    concatenated_word: Optional[str] = None
    single_words: Optional[List[str]] = None
    concatenated_vector: Optional[List[float]] = None
    concatenated_nearest_neighbors: Optional[List[NearestNeighbor]] = None

    @classmethod
    def from_dict(cls, data: Any) -> "ConcatenatedWord":
        what = "ConcatenatedWord"
        data = expect_object(data, what)
        word = data.get("concatenatedWord")
        return cls(
            concatenated_word=word if isinstance(word, str) else None,
            single_words=opt_str_list(data, "singleWords", what),
            concatenated_vector=opt_float_list(data, "concatenatedVector", what),
            concatenated_nearest_neighbors=_neighbors(data, "concatenatedNearestNeighbors", what),
        )


@dataclass(frozen=True)
class IndividualWord:
    word: str
    present: Optional[bool] = None
    info: Optional[ConceptInfo] = None
    concatenated_word: Optional[ConcatenatedWord] = None

    @classmethod
    def from_dict(cls, data: Any) -> "IndividualWord":
        what = "IndividualWord"
        data = expect_object(data, what)
        info = data.get("info")
        concatenated = data.get("concatenatedWord")
        return cls(
            word=req_str(data, "word", what),
            present=opt_bool(data, "present", what),
            info=ConceptInfo.from_dict(info) if info is not None else None,
            concatenated_word=(
                ConcatenatedWord.from_dict(concatenated) if concatenated is not None else None
            ),
        )


@dataclass(frozen=True)
class ContextionaryConcept:
    individual_words: List[IndividualWord] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "ContextionaryConcept":
        what = "ContextionaryConcept"
        data = expect_object(data, what)
        words = opt_list(data, "individualWords", what) or []
        return cls(individual_words=[IndividualWord.from_dict(w) for w in words])


@dataclass(frozen=True)
class ContextionaryExtension:
    """A custom concept taught to the contextionary; `weight` is 0..1."""
    concept: str
    definition: str
    weight: float

    def to_dict(self) -> JSONObject:
        return {"concept": self.concept, "definition": self.definition, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: Any) -> "ContextionaryExtension":
        what = "ContextionaryExtension"
        data = expect_object(data, what)
        weight = opt_float(data, "weight", what)
        return cls(
            concept=req_str(data, "concept", what),
            definition=req_str(data, "definition", what),
            weight=1.0 if weight is None else weight,
        )


__all__ = [
    "NearestNeighbor",
    "ConceptInfo",
    "ConcatenatedWord",
    "IndividualWord",
    "ContextionaryConcept",
    "ContextionaryExtension",
]
