"""Integration test — real Gemini call, no mocks. Requires .env with GEMINI_API_KEY."""

import pytest
from dotenv import load_dotenv

load_dotenv()

from config.config_loader import load_config  # noqa: E402
from consilium.credentials import resolve_api_key  # noqa: E402

_CONFIG = load_config()
_API_KEY = resolve_api_key(_CONFIG.model.api_key_envs)

pytestmark = pytest.mark.integration

if not _API_KEY:
    pytestmark = pytest.mark.skip(reason="No Gemini API key configured")


async def test_full_director_cycle(tmp_path):
    from consilium.models import ConsensusState, FetchOutcome, SessionState
    from consilium.session import SessionController

    async with SessionController(_CONFIG, _API_KEY) as controller:
        accepted = await controller.submit("Should a small team adopt a monorepo?")
        assert accepted
        assert controller.state is SessionState.DONE
        assert controller.last_fetch.outcome is FetchOutcome.DECODED
        assert all(controller.responses.values())

        consensus = await controller.wait_for_consensus()
        assert consensus is ConsensusState.AGREEMENT

        saved = controller.export_report(tmp_path)
        assert saved.exists()
