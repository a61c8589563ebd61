import pytest
import os
import sys
from pathlib import Path
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent))

from config import TextGenerationConfig, get_settings


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables before any imports."""
    env_vars = {
        "LLM_API_KEY": "test_llm_key",
        "LLM_ENDPOINT": "https://llm.test/v1/chat/completions",
        "LLM_MODEL": "test-model",
    }
    for key, value in env_vars.items():
        os.environ[key] = value
    get_settings.cache_clear()
    yield
    # Cleanup
    for key in env_vars.keys():
        os.environ.pop(key, None)
    get_settings.cache_clear()


@pytest.fixture
def llm_config():
    return TextGenerationConfig(
        endpoint="https://llm.test/v1/chat/completions",
        api_key="test_llm_key",
        model="test-model",
        timeout=5.0,
    )


@pytest.fixture
def mock_llm_client():
    """Stand-in for TextGenerationClient with an async generate()."""
    client = MagicMock()
    client.generate = AsyncMock(return_value="The content is likely real. Confidence: 80%")
    return client


@pytest.fixture
def mock_httpx_client():
    """Mock httpx.AsyncClient used as an async context manager."""
    mock_client = MagicMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


@pytest.fixture
def sample_llm_response():
    """Sample chat-completions response body."""
    return {
        "id": "chatcmpl-test",
        "choices": [
            {
                "index": 0,
                "message": {
                    "role": "assistant",
                    "content": (
                        "Verdict: Likely Fake. Confidence: 88%. The article uses SHOCKING "
                        "and urgent language typical of misinformation."
                    ),
                },
                "finish_reason": "stop",
            }
        ],
    }


@pytest.fixture
def test_client():
    """Create a TestClient for FastAPI app."""
    import main
    return TestClient(main.app)


@pytest.fixture
def override_service():
    """Install an AnalysisService as the app's dependency for one test."""
    import main

    def install(service):
        main.app.dependency_overrides[main.get_analysis_service] = lambda: service
        return service

    yield install
    main.app.dependency_overrides.clear()
