import unittest
from dataclasses import replace

from resume_builder.ai.config import AIConfig
from resume_builder.ai.factory import get_ai_client
from resume_builder.ai.providers.openai_provider import OpenAIProvider

BASE = AIConfig(
    enabled=True,
    provider="openai",
    model="gpt-4o-mini",
    api_key="sk-test",
    base_url=None,
    timeout_s=20.0,
    max_retries=0,
)


class AIFactoryTests(unittest.TestCase):
    def test_openai_provider_is_built_with_key(self):
        client = get_ai_client(BASE)
        self.assertIsInstance(client, OpenAIProvider)
        self.assertEqual(client.model, "gpt-4o-mini")

    def test_compatible_base_url_is_accepted(self):
        client = get_ai_client(replace(BASE, base_url="https://router.example.com/v1", model="meta-llama/Llama-3"))
        self.assertEqual(client.model, "meta-llama/Llama-3")

    def test_disabled_or_unconfigured_returns_none(self):
        for cfg in (
            replace(BASE, enabled=False),
            replace(BASE, provider="none"),
            replace(BASE, provider="fallback"),
            replace(BASE, api_key=""),
            replace(BASE, api_key="your_openai_key"),
        ):
            with self.subTest(cfg=cfg):
                self.assertIsNone(get_ai_client(cfg))

    def test_unknown_provider_raises(self):
        with self.assertRaises(ValueError):
            get_ai_client(replace(BASE, provider="mystery"))


if __name__ == "__main__":
    unittest.main()
