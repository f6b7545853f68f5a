from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from langchain_core.prompts import PromptTemplate
from langchain_groq import ChatGroq

from ..core.exceptions import ProviderUnavailable
from .model import AttendanceSnapshot

logger = logging.getLogger(__name__)

REPORT_TEMPLATE = """
Analyze the following student attendance data and provide a brief executive summary.
Identify trends, students at risk of chronic absenteeism, and positive behaviors.
Keep it professional and concise (max 3 paragraphs).

Data:
{data}
"""


class Summarizer(ABC):
    """Turns an attendance snapshot into prose."""

    @abstractmethod
    def generate(self, snapshot: AttendanceSnapshot) -> str:
        """Return the summary text or raise ProviderUnavailable."""
        raise NotImplementedError


class GroqSummarizer(Summarizer):
    def __init__(self, *, api_key: str, model: str = "llama-3.1-8b-instant", temperature: float = 0.3):
        self._llm = ChatGroq(model=model, groq_api_key=api_key, temperature=temperature)
        self._prompt = PromptTemplate(input_variables=["data"], template=REPORT_TEMPLATE)

    def generate(self, snapshot: AttendanceSnapshot) -> str:
        prompt = self._prompt.format(data="\n".join(snapshot.student_lines()))
        try:
            response = self._llm.invoke(prompt)
        except Exception as e:
            logger.exception("Groq request failed")
            raise ProviderUnavailable(str(e)) from e
        return response.content or ""
