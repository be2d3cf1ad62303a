# ================================
# core/clinical/summary_client.py
# ================================

from openai import AsyncOpenAI

from regu_ai.config.logging_setup import get_logger
from regu_ai.config.params import SummaryClientParams

logger = get_logger("clinical.summary_client")

REQUEST_ERROR_MESSAGE = (
    "Error: Unable to process the request due to an API error. "
    "Please check your connection or API key."
)
EMPTY_SUMMARY_MESSAGE = "Error: No summary generated."

SYSTEM_INSTRUCTION = """
You are a highly constrained clinical administrative assistant for a hospital.
Your tasks are strictly limited to documentation formatting and summarization.

RULES:
1. You MUST NOT diagnose conditions, recommend treatments, or offer medical advice.
2. If the input text contains PHI (Protected Health Information), handle it securely by treating it as confidential context.
3. Your output is a DRAFT for the physician to review.
4. Maintain a professional, objective tone.
5. Identify yourself as an AI assistant in the output if asked.
6. Do not introduce bias based on race, gender, or religion.
"""

PROMPT_TEMPLATE = """
Please convert the following unstructured clinical notes into a structured "After Visit Summary" format (S.O.A.P note structure preferred if applicable).

Raw Notes:
"{raw_note}"

Output Format:
**Subjective:** [Patient complaints]
**Objective:** [Observations/Vitals]
**Assessment:** [Summary of condition - DO NOT DIAGNOSE NEWLY, only summarize stated facts]
**Plan:** [Next steps mentioned]

---
DISCLAIMER: This summary is AI-generated and must be verified by a licensed clinician.
"""


def build_prompt(raw_note: str) -> str:
    # 生テキストはそのまま埋め込む（マスキングなし）
    return PROMPT_TEMPLATE.format(raw_note=raw_note)


class SummaryClient:
    """
    SummaryClient
    -------------
    ・臨床メモを1回だけ要約モデルに送る（リトライ・ストリーミングなし）
    ・成功時は要約テキスト、失敗時は固定のエラーメッセージを返す
    ・例外は呼び出し元に出さない
    ・HTTPクライアントは呼び出しごとに作って閉じる
      （UIはクリックごとに asyncio.run で新しいループを回すため）
    """

    def __init__(self, params: SummaryClientParams, client=None):
        self.params = params
        self._client = client

    def _open_client(self) -> AsyncOpenAI:
        return AsyncOpenAI(
            api_key=self.params.api_key or "",
            base_url=self.params.base_url,
            max_retries=0,
        )

    async def _request(self, client, raw_text: str):
        response = await client.chat.completions.create(
            model=self.params.model,
            temperature=self.params.temperature,
            messages=[
                {"role": "system", "content": SYSTEM_INSTRUCTION},
                {"role": "user", "content": build_prompt(raw_text)},
            ],
        )
        return response.choices[0].message.content

    async def summarize_note(self, raw_text: str) -> str:
        try:
            if self._client is not None:
                text = await self._request(self._client, raw_text)
            else:
                async with self._open_client() as client:
                    text = await self._request(client, raw_text)
        except Exception:
            logger.exception("Summary request to %s failed", self.params.model)
            return REQUEST_ERROR_MESSAGE

        if not text:
            logger.warning("Summary response from %s had no text", self.params.model)
            return EMPTY_SUMMARY_MESSAGE
        return text
