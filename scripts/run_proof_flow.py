"""Run the end-to-end proof-of-funds flow against a backend.

Usage:
    uv run python -m scripts.run_proof_flow [sync|async] [deal_id] [required_amount]
Creates two commitments (bank 0: 50, bank 1: 30), generates a proof (sync,
or async with polling), then verifies it. Defaults: async DEAL123 60.
Backend URL and poll interval come from BACKEND_BASE_URL / POLL_INTERVAL_SECONDS.
"""

import asyncio
import json
import sys
from collections.abc import Callable
from dataclasses import asdict, is_dataclass
from typing import Any

from pof_client.application.services.job_controller import ProofJobController
from pof_client.core.config import get_settings
from pof_client.domain.enums import JobState
from pof_client.domain.exceptions import ProofOfFundsException
from pof_client.domain.value_objects import CommitmentRequest, ProofRequest
from pof_client.infrastructure.backend.client import ProofBackendClient
from pof_client.shared.telemetry import TelemetryConfig, setup_logging

DEFAULT_COMMITMENTS = ((0, 50), (1, 30))
MODES = ("sync", "async")


def _to_json(value: Any) -> str:
    if is_dataclass(value):
        value = asdict(value)
    return json.dumps(value, default=str, indent=2)


def parse_amount(text: str) -> int | float:
    """Parse a CLI amount, keeping whole numbers as int so they go out as JSON integers."""
    try:
        return int(text)
    except ValueError:
        return float(text)


async def run_flow(
    client: ProofBackendClient,
    mode: str,
    deal_id: str,
    required_amount: int | float,
    *,
    poll_interval_seconds: float | None = None,
    emit: Callable[[str, Any], None] | None = None,
) -> dict[str, Any]:
    """Commit, prove, verify. Returns each step's result keyed by step name."""
    if mode not in MODES:
        raise ValueError(f"mode must be one of {', '.join(MODES)}, got: {mode!r}")
    results: dict[str, Any] = {}

    def record(step: str, value: Any) -> None:
        results[step] = value
        if emit is not None:
            emit(step, value)

    for bank_index, amount in DEFAULT_COMMITMENTS:
        ack = await client.create_commitment(
            CommitmentRequest(bank_index=bank_index, amount=amount, deal_id=deal_id)
        )
        record(f"commitment_{bank_index}", ack)

    request = ProofRequest(required_amount=required_amount, deal_id=deal_id)
    if mode == "sync":
        record("proof", await client.generate_proof_sync(request))
    else:
        async with ProofJobController(
            client,
            poll_interval_seconds=poll_interval_seconds,
            on_status=(lambda status: emit("status", status)) if emit else None,
        ) as controller:
            record("job", await controller.start_job(request))
            final = await controller.wait_for_result()
        record("job_status", final)
        if final.state is JobState.FAILED:
            return results
        record("proof", final.proof)

    record("verification", await client.verify_proof(deal_id))
    return results


def _emit(step: str, value: Any) -> None:
    print(f"== {step}")
    print(_to_json(value))


async def main() -> None:
    """Parse argv, run the flow, exit 1 on client errors."""
    mode = sys.argv[1] if len(sys.argv) > 1 else "async"
    deal_id = sys.argv[2] if len(sys.argv) > 2 else "DEAL123"
    try:
        required_amount = parse_amount(sys.argv[3]) if len(sys.argv) > 3 else 60
    except ValueError:
        print(f"required_amount must be a number, got: {sys.argv[3]!r}", file=sys.stderr)
        sys.exit(1)
    if mode not in MODES:
        print(
            "Usage: uv run python -m scripts.run_proof_flow [sync|async] [deal_id] [required_amount]",
            file=sys.stderr,
        )
        sys.exit(1)

    settings = get_settings()
    setup_logging(settings.debug)
    try:
        with TelemetryConfig(settings):
            async with ProofBackendClient() as client:
                results = await run_flow(
                    client, mode, deal_id, required_amount, emit=_emit
                )
    except ProofOfFundsException as e:
        print(f"{e.error_code}: {e.message}", file=sys.stderr)
        sys.exit(1)
    if "verification" not in results:
        print("Proof job failed; skipped verification", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
