#!/usr/bin/env python3
"""
Run the integer square root correctness properties against a verification plan.

The plan (YAML, default `docs/verification_plan.yaml`) names the engines and
widths to check and how many inputs to draw. For every (width, engine) pair
the tool checks, on the same input set:
  - bracketing: r*r <= n and (r+1)**2 overflows the width or exceeds n,
  - agreement with the binary digit-by-digit engine,
  - signed consistency for inputs that fit the signed type of the same width.

Inputs: 0..edge_count-1, max-edge_count+1..max, 2**k and 2**k - 1, the
neighbourhood of the first and last `perfect_squares` perfect squares,
`random_samples` seeded random values, and every value of the width when
``bits <= exhaustive_max_bits``.

Example:
  python3 tools/verify_isqrt.py --plan docs/verification_plan.yaml --width 64
"""

from __future__ import annotations

import argparse
import json
import random
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Iterator, Sequence

import yaml

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fixed_isqrt import binary, dispatch, signed
from fixed_isqrt.arith import is_floor_root, mask, max_root
from fixed_isqrt.types import SUPPORTED_WIDTHS, Engine, IntType

DEFAULT_PLAN_PATH = ROOT / "docs" / "verification_plan.yaml"
PLAN_SCHEMA = "fixed_isqrt/verification-plan/v1"
MAX_REPORTED_FAILURES = 20


class PlanError(Exception):
    pass


@dataclass(frozen=True)
class Plan:
    engines: tuple[Engine, ...]
    widths: tuple[int, ...]
    exhaustive_max_bits: int = 16
    edge_count: int = 128
    perfect_squares: int = 1024
    random_samples: int = 1000
    seed: int = 0


@dataclass
class PairReport:
    bits: int
    engine: Engine
    checked: int = 0
    failures: list[dict[str, Any]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def fail(self, *, kind: str, n: int, got: Any, expected: Any = None) -> None:
        if len(self.failures) < MAX_REPORTED_FAILURES:
            self.failures.append({"kind": kind, "n": str(n), "got": str(got), "expected": str(expected)})

    def to_dict(self) -> dict[str, Any]:
        return {
            "bits": self.bits,
            "engine": self.engine.value,
            "checked": self.checked,
            "ok": self.ok,
            "failures": self.failures,
        }


# -- Plan loading ----------------------------------------------------------------

def _require_mapping(obj: Any, *, name: str) -> dict[str, Any]:
    if not isinstance(obj, dict):
        raise PlanError(f"{name} must be an object")
    return obj


def _require_list(obj: Any, *, name: str) -> list[Any]:
    if not isinstance(obj, list) or not obj:
        raise PlanError(f"{name} must be a non-empty list")
    return obj


def _require_count(obj: Any, *, name: str) -> int:
    if isinstance(obj, bool) or not isinstance(obj, int) or obj < 0:
        raise PlanError(f"{name} must be a non-negative int")
    return obj


def parse_plan(root: Any) -> Plan:
    root = _require_mapping(root, name="plan")
    schema = root.get("schema")
    if schema != PLAN_SCHEMA:
        raise PlanError(f"unsupported plan.schema: {schema!r}")

    engines: list[Engine] = []
    for i, raw in enumerate(_require_list(root.get("engines"), name="plan.engines")):
        try:
            engines.append(Engine(raw))
        except ValueError:
            raise PlanError(f"plan.engines[{i}]: unknown engine {raw!r}") from None

    widths: list[int] = []
    for i, raw in enumerate(_require_list(root.get("widths"), name="plan.widths")):
        if isinstance(raw, bool) or raw not in SUPPORTED_WIDTHS:
            raise PlanError(f"plan.widths[{i}]: unsupported width {raw!r}")
        widths.append(raw)

    checks = _require_mapping(root.get("checks", {}), name="plan.checks")
    unknown = sorted(set(checks) - {"exhaustive_max_bits", "edge_count", "perfect_squares", "random_samples", "seed"})
    if unknown:
        raise PlanError(f"plan.checks: unknown keys {unknown}")
    counts = {k: _require_count(v, name=f"plan.checks.{k}") for k, v in checks.items()}

    return Plan(engines=tuple(engines), widths=tuple(widths), **counts)


def load_plan(path: Path) -> Plan:
    raw = path.read_text(encoding="utf-8")
    try:
        return parse_plan(yaml.safe_load(raw))
    except yaml.YAMLError as exc:
        raise PlanError(f"{path}: invalid YAML: {exc}") from exc


# -- Inputs ------------------------------------------------------------------------

def iter_inputs(bits: int, plan: Plan) -> Iterator[int]:
    """Inputs for one width; may repeat values."""
    top = mask(bits)
    if bits <= plan.exhaustive_max_bits:
        yield from range(top + 1)
        return

    yield from range(min(plan.edge_count, top + 1))
    yield from range(max(0, top - plan.edge_count + 1), top + 1)
    for exponent in range(bits):
        yield 1 << exponent
        yield (1 << exponent) - 1

    limit = min(plan.perfect_squares, max_root(bits))
    for k in range(limit):
        yield k * k
        yield k * k + k
        yield k * k + 2 * k
    for k in range(max_root(bits) - limit, max_root(bits) + 1):
        yield k * k
        yield k * k + k
        yield k * k + 2 * k

    rng = random.Random(plan.seed)
    for _ in range(plan.random_samples):
        yield rng.getrandbits(bits)


# -- Checks ------------------------------------------------------------------------

def check_pair(bits: int, engine: Engine, inputs: Sequence[int]) -> PairReport:
    report = PairReport(bits=bits, engine=engine)
    signed_max = IntType(bits, signed=True).max_value
    for n in inputs:
        report.checked += 1
        got = dispatch.isqrt_unchecked(n, bits, engine)
        if not is_floor_root(got, n, bits):
            report.fail(kind="bracketing", n=n, got=got)
            continue
        expected = binary.isqrt_unchecked(n)
        if got != expected:
            report.fail(kind="agreement", n=n, got=got, expected=expected)
        if n <= signed_max:
            signed_got = signed.checked_isqrt(n, bits, engine)
            if signed_got != got:
                report.fail(kind="signed", n=n, got=signed_got, expected=got)
            negative = -n - 1
            if signed.checked_isqrt(negative, bits, engine) is not None:
                report.fail(kind="negative", n=negative, got="value", expected=None)
    return report


def run_plan(plan: Plan, *, widths: Sequence[int] | None = None) -> list[PairReport]:
    reports: list[PairReport] = []
    for bits in plan.widths:
        if widths and bits not in widths:
            continue
        inputs = list(iter_inputs(bits, plan))
        for engine in plan.engines:
            reports.append(check_pair(bits, engine, inputs))
    return reports


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Verify integer square root engines against a YAML plan.")
    p.add_argument("--plan", type=Path, default=DEFAULT_PLAN_PATH, help="Path to the verification plan (YAML)")
    p.add_argument("--width", type=int, action="append", choices=SUPPORTED_WIDTHS, help="Only check this width (repeatable)")
    p.add_argument("--seed", type=int, default=None, help="Override plan.checks.seed")
    args = p.parse_args(argv)

    try:
        plan = load_plan(args.plan)
    except (OSError, PlanError) as exc:
        print(f"verify_isqrt error: {exc}", file=sys.stderr)
        return 2

    if args.seed is not None:
        plan = replace(plan, seed=args.seed)

    reports = run_plan(plan, widths=args.width)
    ok = all(r.ok for r in reports)
    print(json.dumps({"ok": ok, "results": [r.to_dict() for r in reports]}, indent=2, sort_keys=True))
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
