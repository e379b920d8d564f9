"""Black-box verification harness for the calculator client.

Runs the client as a subprocess for each :class:`HarnessVector`, in
``--number-only`` mode, and checks its output against the expected value
with an absolute tolerance.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from enum import Enum

from pydantic import BaseModel

from mcpsample.client.client import DEFAULT_API_URL

logger = logging.getLogger(__name__)

TOLERANCE = 0.0001
DEFAULT_TIMEOUT = 30.0
ERROR_PHRASES = ("error", "divide by zero", "cannot divide")

DEFAULT_CLIENT_COMMAND = (sys.executable, "-m", "mcpsample.cli", "calc")


class HarnessVector(BaseModel):
    """One calculator invocation and its expected outcome.

    ``expected`` is ``None`` for vectors that must fail.
    """

    description: str
    a: str
    operation: str
    b: str
    expected: float | None

    @property
    def expects_failure(self) -> bool:
        return self.expected is None


class Outcome(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    TIMEOUT = "timeout"
    SPAWN_ERROR = "spawn_error"


class VectorResult(BaseModel):
    vector: HarnessVector
    outcome: Outcome
    output: str = ""
    exit_code: int | None = None
    detail: str = ""

    @property
    def passed(self) -> bool:
        return self.outcome == Outcome.PASSED


class HarnessReport(BaseModel):
    results: list[VectorResult] = []

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return len(self.results) - self.passed

    @property
    def total(self) -> int:
        return len(self.results)


def _v(description: str, a: str, op: str, b: str, expected: float | None) -> HarnessVector:
    return HarnessVector(description=description, a=a, operation=op, b=b, expected=expected)


DEFAULT_VECTORS: tuple[HarnessVector, ...] = (
    _v("Basic addition", "10", "+", "5", 15),
    _v("Decimal addition", "7.5", "+", "2.3", 9.8),
    _v("Negative addition", "-5", "+", "3", -2),
    _v("Zero addition", "0", "+", "42", 42),
    _v("Large numbers", "1000000", "+", "2000000", 3000000),
    _v("Basic subtraction", "15", "-", "7", 8),
    _v("Decimal subtraction", "10.5", "-", "3.2", 7.3),
    _v("Negative subtraction", "-10", "-", "-5", -5),
    _v("Zero subtraction", "25", "-", "0", 25),
    _v("Result becomes negative", "5", "-", "10", -5),
    _v("Basic multiplication", "6", "*", "7", 42),
    _v("Decimal multiplication", "2.5", "*", "4.0", 10),
    _v("Negative multiplication", "-3", "*", "4", -12),
    _v("Zero multiplication", "999", "*", "0", 0),
    _v("Fractional multiplication", "0.5", "*", "8", 4),
    _v("Basic division", "20", "/", "4", 5),
    _v("Decimal division", "15.0", "/", "3.0", 5),
    _v("Negative division", "-12", "/", "3", -4),
    _v("Fractional result", "7", "/", "2", 3.5),
    _v("Division by one", "42", "/", "1", 42),
    _v("Division by zero", "10", "/", "0", None),
)


def evaluate(vector: HarnessVector, output: str, exit_code: int) -> VectorResult:
    """Judge one finished client run."""
    text = output.strip()
    if vector.expects_failure:
        lowered = text.lower()
        if exit_code != 0 or any(phrase in lowered for phrase in ERROR_PHRASES):
            return VectorResult(vector=vector, outcome=Outcome.PASSED, output=text, exit_code=exit_code)
        return VectorResult(
            vector=vector,
            outcome=Outcome.FAILED,
            output=text,
            exit_code=exit_code,
            detail="Expected an error but the call succeeded",
        )

    if exit_code != 0:
        return VectorResult(
            vector=vector,
            outcome=Outcome.FAILED,
            output=text,
            exit_code=exit_code,
            detail=f"Client exited with code {exit_code}",
        )

    last_line = text.splitlines()[-1] if text else ""
    try:
        actual = float(last_line)
    except ValueError:
        return VectorResult(
            vector=vector,
            outcome=Outcome.FAILED,
            output=text,
            exit_code=exit_code,
            detail=f"Output is not a number: {last_line!r}",
        )

    assert vector.expected is not None
    if abs(actual - vector.expected) <= TOLERANCE:
        return VectorResult(vector=vector, outcome=Outcome.PASSED, output=text, exit_code=exit_code)
    return VectorResult(
        vector=vector,
        outcome=Outcome.FAILED,
        output=text,
        exit_code=exit_code,
        detail=f"Expected {vector.expected}, got {actual}",
    )


async def run_vector(
    vector: HarnessVector,
    *,
    command: tuple[str, ...] = DEFAULT_CLIENT_COMMAND,
    url: str = DEFAULT_API_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> VectorResult:
    """Run the client for *vector* as a subprocess and evaluate its output."""
    args = [*command, vector.a, vector.operation, vector.b, url, "--number-only"]
    logger.debug("Running %s", args)
    try:
        process = await asyncio.create_subprocess_exec(
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
        )
    except OSError as exc:
        return VectorResult(vector=vector, outcome=Outcome.SPAWN_ERROR, detail=str(exc))

    try:
        stdout, _ = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return VectorResult(
            vector=vector,
            outcome=Outcome.TIMEOUT,
            detail=f"Client did not finish within {timeout}s",
        )

    output = stdout.decode(errors="replace")
    return evaluate(vector, output, process.returncode or 0)


async def run_harness(
    vectors: tuple[HarnessVector, ...] | list[HarnessVector] = DEFAULT_VECTORS,
    *,
    command: tuple[str, ...] = DEFAULT_CLIENT_COMMAND,
    url: str = DEFAULT_API_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> HarnessReport:
    """Run every vector in order and collect the results."""
    report = HarnessReport()
    for vector in vectors:
        result = await run_vector(vector, command=command, url=url, timeout=timeout)
        logger.info("%s: %s", vector.description, result.outcome.value)
        report.results.append(result)
    return report
