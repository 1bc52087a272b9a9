from openai import OpenAI

import chatrelay.config.config as configs

# Single attempt per exchange; failures surface to the relay immediately.
client = OpenAI(
    api_key=configs.LLM_API_KEY or "missing-api-key",
    base_url=configs.LLM_BASE_URL,
    max_retries=0,
)


def call_llm(messages: list[dict]) -> str | None:
    response = client.chat.completions.create(
        model=configs.MODEL,
        messages=messages,
        temperature=configs.TEMPERATURE,
        max_tokens=configs.MAX_TOKENS,
    )
    if not response.choices:
        return None
    message = response.choices[0].message
    if message is None:
        return None
    return message.content
