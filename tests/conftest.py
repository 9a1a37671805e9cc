"""Shared fakes for the hosted Gemini endpoints."""

import asyncio
from typing import Any, List

import pytest

from memora_hanzi.agents import KeywordBrainstormExpert, MnemonicImageExpert, PinyinExpert
from memora_hanzi.config.dependencies import Dependencies
from memora_hanzi.config.settings import Settings
from memora_hanzi.workflows.name_processing import NameProcessingPipeline

# Scripted reply that makes FakeTextClient return the caller's fallback,
# the same thing the real client does with malformed JSON.
MALFORMED = None


class FakeTextClient:
    """Stands in for TextGenerationClient with scripted replies.

    Each call consumes one scripted item: a dict is validated into the
    requested response model, ``MALFORMED`` returns the fallback, an
    exception is raised, and an async function is awaited with the prompt
    and its result used as the reply.
    """

    def __init__(self, replies: List[Any] = ()):
        self.replies = list(replies)
        self.calls = []

    async def generate_structured(self, prompt, response_model, fallback, *, temperature=None, max_output_tokens=None):
        self.calls.append({
            "prompt": prompt,
            "response_model": response_model,
            "temperature": temperature,
            "max_output_tokens": max_output_tokens,
        })
        if not self.replies:
            return fallback
        reply = self.replies.pop(0)
        if asyncio.iscoroutinefunction(reply):
            reply = await reply(prompt)
        if isinstance(reply, BaseException):
            raise reply
        if reply is MALFORMED:
            return fallback
        return response_model.model_validate(reply)


class FakeImageClient:
    def __init__(self, replies: List[Any] = ("data:image/jpeg;base64,AAAA",)):
        self.replies = list(replies)
        self.prompts = []

    async def generate_image(self, prompt):
        self.prompts.append(prompt)
        reply = self.replies.pop(0) if self.replies else "data:image/jpeg;base64,AAAA"
        if asyncio.iscoroutinefunction(reply):
            reply = await reply(prompt)
        if isinstance(reply, BaseException):
            raise reply
        return reply


class RecordingSleep:
    """Replacement for asyncio.sleep that records delays without waiting."""

    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


@pytest.fixture
def fake_sleep():
    return RecordingSleep()


@pytest.fixture
def make_pipeline(fake_sleep):
    def factory(text_client=None, image_client=None):
        text_client = text_client or FakeTextClient()
        image_client = image_client or FakeImageClient()
        return NameProcessingPipeline(
            pinyin_expert=PinyinExpert(text_client),
            keyword_expert=KeywordBrainstormExpert(text_client, sleep=fake_sleep),
            image_expert=MnemonicImageExpert(image_client),
        )
    return factory


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, gemini_api_key="test-key")


@pytest.fixture
def make_dependencies(test_settings):
    def factory(text_client=None, image_client=None, settings=None):
        return Dependencies(
            text_client=text_client or FakeTextClient(),
            image_client=image_client or FakeImageClient(),
            settings=settings or test_settings,
        )
    return factory
