"""
Unit tests for EvaluationFactory.
"""

import pytest

from conftest import FakeAgent
from hebo_eval.application.use_cases import RunEvaluationUseCase
from hebo_eval.config import load_config
from hebo_eval.domain.exceptions import ConfigurationError
from hebo_eval.infrastructure.agents import OpenAICompatibleAgent
from hebo_eval.infrastructure.factories import EvaluationFactory


@pytest.fixture
def config(tmp_path, monkeypatch):
    for var in ("OPENAI_API_KEY", "HEBO_API_KEY", "ANTHROPIC_API_KEY"):
        monkeypatch.delenv(var, raising=False)

    path = tmp_path / "hebo-eval.yaml"
    path.write_text(
        "providers:\n"
        "  openai:\n"
        "    api_key: sk-test\n"
        "  hebo:\n"
        "    api_key: hb-test\n"
        "scoring:\n"
        "  threshold: 0.7\n"
        "  max_tokens: 100\n"
        "execution:\n"
        "  timeout_seconds: 12\n"
    )
    return load_config(str(path))


class TestCreateScoringService:
    """Tests for create_scoring_service()."""

    def test_uses_scoring_section(self, config):
        scoring = EvaluationFactory.create_scoring_service(config)
        assert scoring.threshold == 0.7
        assert scoring.max_tokens == 100
        assert scoring.ngram_sizes == (1, 2)


class TestCreateAgent:
    """Tests for create_agent()."""

    def test_openai_agent(self, config):
        agent = EvaluationFactory.create_agent("gpt-4o", config)

        assert isinstance(agent, OpenAICompatibleAgent)
        assert agent.agent_id == "openai:gpt-4o"
        assert agent.endpoint == "https://api.openai.com/v1/chat/completions"

    def test_hebo_agent(self, config):
        agent = EvaluationFactory.create_agent("hebo-support", config)

        assert agent.agent_id == "hebo:support"
        assert agent.endpoint == "https://app.hebo.ai/chat/completions"

    def test_anthropic_not_supported(self, config):
        with pytest.raises(ConfigurationError, match="not supported"):
            EvaluationFactory.create_agent("claude-3-opus", config)

    def test_unknown_model(self, config):
        with pytest.raises(ConfigurationError):
            EvaluationFactory.create_agent("mystery-model", config)

    def test_missing_api_key(self, monkeypatch):
        for var in ("OPENAI_API_KEY", "HEBO_API_KEY"):
            monkeypatch.delenv(var, raising=False)
        with pytest.raises(ConfigurationError, match="API key not found"):
            EvaluationFactory.create_agent("gpt-4o", load_config())


class TestCreateUseCase:
    """Tests for create_use_case()."""

    def test_with_agent_name(self, config):
        use_case = EvaluationFactory.create_use_case("gpt-4o", config)
        assert isinstance(use_case, RunEvaluationUseCase)

    def test_with_injected_agent(self, config):
        use_case = EvaluationFactory.create_use_case(config=config, agent=FakeAgent("hi"))
        assert isinstance(use_case, RunEvaluationUseCase)

    def test_requires_agent(self, config):
        with pytest.raises(ConfigurationError):
            EvaluationFactory.create_use_case(config=config)
