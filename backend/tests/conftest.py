"""
Shared fixtures for the CV parser tests
"""
import textwrap

import pytest

from cvparser.cv.parser import CVParser

SAMPLE_CV = textwrap.dedent(
    """
    John Doe
    Software Engineer

    Skills:
    JavaScript, TypeScript, React, Node.js, Python

    Experience:
    Senior Software Engineer at Tech Company
    January 2020 - Present
    - Led development of microservices architecture
    - Improved system performance by 40%

    Software Developer at Startup Inc
    June 2017 - December 2019
    - Built RESTful APIs
    - Implemented CI/CD pipelines

    Education:
    Bachelor of Science in Computer Science
    State University
    2013 - 2017
    """
)


def dedent(text: str) -> str:
    return textwrap.dedent(text)


def static_extractor(text: str):
    """Extractor stand-in that always returns ``text``"""
    def extract(content: bytes) -> str:
        return text
    return extract


@pytest.fixture
def parser() -> CVParser:
    return CVParser()


@pytest.fixture
def sample_cv() -> str:
    return SAMPLE_CV
