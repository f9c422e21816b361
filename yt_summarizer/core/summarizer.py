"""
Module for summarizing transcripts using LLM models.
"""

from typing import Any, Iterable, List

from langchain_core.prompts import ChatPromptTemplate
from langchain.chat_models import init_chat_model

from yt_summarizer.core.chunker import (
    chunk_duration, chunk_segments, chunk_text, filter_valid_segments, label_chunk,
)
from yt_summarizer.core.prompts import (
    full_system_template,
    full_user_template,
    segment_system_template,
    segment_user_template,
)
from yt_summarizer.models.schemas import SummaryConfig, SummaryResult
from yt_summarizer.utils.error_handling import MissingCredentialsError, SummaryGenerationError
from yt_summarizer.utils.logger import logging


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    def __init__(self, summary_config: SummaryConfig):
        """
        Initialize the summarizer with its configuration.

        Args:
            summary_config: Model, API key, token budgets and chunk ceiling
        """
        if not summary_config.api_key:
            raise MissingCredentialsError(
                "OpenAI API key is required. Set OPENAI_API_KEY in .env file or pass directly."
            )
        self.summary_config = summary_config

    def _chat_model(self, max_tokens: int):
        kwargs = {}
        if self.summary_config.temperature is not None:
            kwargs["temperature"] = self.summary_config.temperature
        return init_chat_model(
            model=self.summary_config.model,
            model_provider="openai",
            api_key=self.summary_config.api_key,
            max_tokens=max_tokens,
            **kwargs,
        )

    def _complete(self, system_template: str, user_template: str, text: str, max_tokens: int) -> str:
        """Send one system + user exchange and return the trimmed reply."""
        prompt = ChatPromptTemplate.from_messages([
            ("system", system_template),
            ("user", user_template),
        ])
        messages = prompt.format_messages(text=text)
        llm = self._chat_model(max_tokens)

        try:
            reply = llm.invoke(messages)
        except Exception as e:
            logging.error(f"Chat completion request failed: {e}")
            raise SummaryGenerationError("Failed to generate summary") from e

        content = getattr(reply, "content", None)
        if not isinstance(content, str):
            logging.error(f"Unexpected chat completion reply: {reply!r}")
            raise SummaryGenerationError("Failed to generate summary")
        return content.strip()

    def summarize(self, transcript_text: str) -> str:
        """
        Summarize a whole transcript.

        Args:
            transcript_text: Full transcript text to summarize

        Returns:
            Summarized text
        """
        logging.info(f"Summarizing transcript of {len(transcript_text)} characters")
        return self._complete(
            full_system_template,
            full_user_template,
            transcript_text,
            self.summary_config.full_max_tokens,
        )

    def summarize_segment(self, segment_text: str) -> str:
        """Summarize the text of one chunk."""
        return self._complete(
            segment_system_template,
            segment_user_template,
            segment_text,
            self.summary_config.segment_max_tokens,
        )

    def summarize_incremental(self, segments: Iterable[Any]) -> List[SummaryResult]:
        """
        Summarize a transcript chunk by chunk.

        Segments are filtered and grouped into chunks of at most
        ``chunk_seconds``; the chunks are summarized one after another.

        Args:
            segments: Raw segment dicts or TranscriptSegment objects

        Returns:
            One SummaryResult per chunk, in transcript order

        Raises:
            NoValidSegmentsError: if no segment has usable timing
        """
        valid_segments = filter_valid_segments(segments)
        chunks = chunk_segments(valid_segments, self.summary_config.chunk_seconds)
        logging.info(f"Summarizing {len(valid_segments)} segments in {len(chunks)} chunks")

        summaries = []
        for index, chunk in enumerate(chunks):
            time_label = label_chunk(index, chunk)
            logging.debug(f"Summarizing {time_label} ({chunk_duration(chunk):.0f}s)")
            summaries.append(
                SummaryResult(time=time_label, summary=self.summarize_segment(chunk_text(chunk)))
            )
        return summaries
