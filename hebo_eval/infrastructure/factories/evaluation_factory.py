"""
Evaluation Factory

Factory for creating fully-wired evaluation use cases from configuration.

Keeps the CLI, tests and notebooks free of dependency wiring: configuration
goes in, a RunEvaluationUseCase comes out.
"""

from typing import Optional

from hebo_eval.application.use_cases import RunEvaluationUseCase
from hebo_eval.config import (
    EvalConfig,
    ProviderType,
    get_config,
    get_provider_api_key,
    get_provider_config,
)
from hebo_eval.domain.exceptions import ConfigurationError
from hebo_eval.domain.interfaces import IAgent
from hebo_eval.domain.services import FuzzyMatchScoringService, ScoringService
from hebo_eval.infrastructure.agents import OpenAICompatibleAgent, get_provider_from_model
from hebo_eval.infrastructure.loaders import TestCaseLoader

DEFAULT_BASE_URLS = {
    ProviderType.OPENAI: "https://api.openai.com/v1",
    ProviderType.HEBO: "https://app.hebo.ai",
}


class EvaluationFactory:
    """
    Factory to create fully-wired evaluation use cases.

    Design Principles:
    1. **Config-Driven**: Defaults come from the loaded EvalConfig
    2. **Explicit Overrides**: Callers can inject their own agent or config
    3. **Provider from Model Name**: 'gpt-*', 'hebo-*', 'claude-*' pick the provider
    """

    @staticmethod
    def create_scoring_service(config: Optional[EvalConfig] = None) -> ScoringService:
        """Create a ScoringService from the scoring section of the config."""
        scoring = (config or get_config()).scoring
        return ScoringService(
            threshold=scoring.threshold,
            ngram_sizes=tuple(scoring.ngram_sizes),
            ngram_weight=scoring.ngram_weight,
            lcs_weight=scoring.lcs_weight,
            assertion_weight=scoring.assertion_weight,
            max_tokens=scoring.max_tokens,
            fuzzy_match_service=FuzzyMatchScoringService(max_tokens=scoring.max_tokens),
        )

    @staticmethod
    def create_agent(agent_name: str, config: Optional[EvalConfig] = None) -> IAgent:
        """
        Create the agent for a model name.

        Args:
            agent_name: Model name, e.g. 'gpt-4o' or 'hebo-my-agent'
            config: Configuration (defaults to get_config())

        Raises:
            ConfigurationError: For unknown models, unconfigured providers,
                providers without an implementation, or missing API keys
        """
        config = config or get_config()
        provider, model = get_provider_from_model(agent_name)

        if provider == ProviderType.ANTHROPIC.value:
            raise ConfigurationError(
                f"Provider '{provider}' is recognised but not supported; use a gpt- or hebo- model"
            )

        provider_config = get_provider_config(provider, config)
        api_key = get_provider_api_key(provider, config)
        base_url = provider_config.base_url or DEFAULT_BASE_URLS[provider_config.provider]

        kwargs = {}
        if provider_config.auth_header is not None:
            kwargs["auth_header_name"] = provider_config.auth_header.name
            kwargs["auth_header_format"] = provider_config.auth_header.format

        return OpenAICompatibleAgent(
            model=model,
            base_url=base_url,
            api_key=api_key,
            provider=provider,
            timeout=config.execution.timeout_seconds,
            **kwargs,
        )

    @staticmethod
    def create_use_case(
        agent_name: Optional[str] = None,
        config: Optional[EvalConfig] = None,
        agent: Optional[IAgent] = None,
    ) -> RunEvaluationUseCase:
        """
        Create a fully-wired RunEvaluationUseCase.

        Args:
            agent_name: Model name used to build the agent (ignored if agent is given)
            config: Configuration (defaults to get_config())
            agent: Pre-built agent, e.g. a test double

        Examples:
            # Agent from configuration
            use_case = EvaluationFactory.create_use_case("gpt-4o")

            # Test mode with a fake agent
            use_case = EvaluationFactory.create_use_case(agent=FakeAgent())
        """
        config = config or get_config()

        if agent is None:
            if not agent_name:
                raise ConfigurationError("Either agent_name or agent must be provided")
            agent = EvaluationFactory.create_agent(agent_name, config)

        return RunEvaluationUseCase(
            agent=agent,
            scoring_service=EvaluationFactory.create_scoring_service(config),
            loader=TestCaseLoader(),
            timeout_seconds=config.execution.timeout_seconds,
        )
