"""
Pytest configuration and fixtures.
"""

import json

import pytest


class FakeModelClient:
    """미리 정한 응답(또는 예외)을 순서대로 돌려주는 모델 클라이언트."""

    model_name = "fake-model"

    def __init__(self, *responses):
        self._responses = list(responses)
        self.prompts: list[str] = []

    @property
    def calls(self) -> int:
        return len(self.prompts)

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        response = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def product_description():
    """200자 분량의 제품 설명."""
    text = (
        "Linear is an issue tracker built for modern software teams. It offers "
        "keyboard-first navigation, automatic cycles, and GitHub sync so engineers "
        "can plan sprints and ship faster without leaving the flow of their work."
    )
    assert len(text) >= 200
    return text


@pytest.fixture
def analysis_payload():
    """여덟 필드가 모두 채워진 모델 응답."""
    return {
        "productName": "Linear",
        "oneLineSummary": "A fast, keyboard-first issue tracker for software teams.",
        "marketPositioning": "Linear positions itself as the opinionated, high-speed alternative to Jira.",
        "targetAudience": "Engineering and product teams at startups and scale-ups.",
        "keyDifferentiators": [
            "Keyboard-first UI",
            "Automatic cycles",
            "Deep GitHub integration",
        ],
        "trendAnalysis": "Developer tools are trending toward speed and opinionated workflows.",
        "growthPotential": "High, driven by bottom-up adoption in engineering orgs.",
        "recommendations": [
            "Expand enterprise reporting",
            "Offer a migration assistant from Jira",
        ],
    }


@pytest.fixture
def analysis_json(analysis_payload):
    """analysis_payload의 JSON 문자열."""
    return json.dumps(analysis_payload)


@pytest.fixture
def fake_client():
    """FakeModelClient 팩토리."""
    return FakeModelClient
