"""Serialization for paths, counterexamples and reachability graphs.

States and actions are opaque to this package, so every function takes
an ``encode`` callable turning them into JSON-compatible values (``repr``
by default) and, where a round trip is possible, a ``decode`` callable
turning them back.

Round-trip guarantee: ``path_from_dict(path_to_dict(p, enc), dec) == p``
whenever ``dec(enc(x)) == x`` for every state and action ``x``.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from transys.core.paths import Path, Step
from transys.verification.graph import ReachabilityGraph
from transys.verification.invariants import Counterexample

Encoder = Callable[[Any], Any]
Decoder = Callable[[Any], Any]


def _identity(value: Any) -> Any:
    return value


# ── Path serialization ─────────────────────────────────────────────────


def path_to_dict(path: Path[Any, Any], encode: Encoder = repr) -> dict[str, Any]:
    """Serialize a Path to a plain dict.

    Args:
        path: The path to serialize.
        encode: Converts states and actions to JSON-compatible values.

    Returns:
        A dict with ``head`` and a list of ``{"action", "state"}`` steps.
    """
    return {
        "head": encode(path.head),
        "steps": [
            {"action": encode(step.action), "state": encode(step.state)}
            for step in path.steps
        ],
    }


def path_from_dict(data: dict[str, Any], decode: Decoder = _identity) -> Path[Any, Any]:
    """Deserialize a Path from a dict."""
    return Path(
        decode(data["head"]),
        tuple(Step(decode(s["action"]), decode(s["state"])) for s in data["steps"]),
    )


# ── Counterexample serialization ───────────────────────────────────────


def counterexample_to_dict(
    counterexample: Counterexample[Any, Any],
    encode: Encoder = repr,
) -> dict[str, Any]:
    """Serialize a Counterexample."""
    return {
        "state": encode(counterexample.state),
        "path": path_to_dict(counterexample.path, encode),
        "length": counterexample.path.length,
    }


def counterexample_from_dict(
    data: dict[str, Any],
    decode: Decoder = _identity,
) -> Counterexample[Any, Any]:
    """Deserialize a Counterexample."""
    return Counterexample(decode(data["state"]), path_from_dict(data["path"], decode))


def counterexample_to_json(
    counterexample: Counterexample[Any, Any],
    encode: Encoder = repr,
    indent: int | None = None,
) -> str:
    """Serialize a Counterexample to a JSON string."""
    return json.dumps(counterexample_to_dict(counterexample, encode), indent=indent)


def counterexample_from_json(
    text: str,
    decode: Decoder = _identity,
) -> Counterexample[Any, Any]:
    """Deserialize a Counterexample from a JSON string."""
    return counterexample_from_dict(json.loads(text), decode)


# ── Reachability graph serialization ───────────────────────────────────


def reachability_graph_to_dict(
    graph: ReachabilityGraph[Any, Any],
    encode: Encoder = repr,
) -> dict[str, Any]:
    """Serialize a ReachabilityGraph."""
    return {
        "initial_states": [encode(s) for s in graph.initial_states],
        "states": [encode(s) for s in graph.states],
        "edges": [
            {
                "source": encode(e.source),
                "action": encode(e.action),
                "target": encode(e.target),
            }
            for e in graph.edges
        ],
        "truncated": graph.truncated,
    }


__all__ = [
    # Path
    "path_to_dict",
    "path_from_dict",
    # Counterexample
    "counterexample_to_dict",
    "counterexample_from_dict",
    "counterexample_to_json",
    "counterexample_from_json",
    # Reachability graph
    "reachability_graph_to_dict",
]
