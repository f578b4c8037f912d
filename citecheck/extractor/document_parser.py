"""Plain-text extraction for briefs and court documents (PDF, Word, text)."""

import logging
from pathlib import Path
from zipfile import BadZipFile

import docx
from docx.opc.exceptions import PackageNotFoundError
from pdfminer.high_level import extract_text
from pdfminer.layout import LAParams
from pdfminer.psparser import PSException

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = (".txt", ".text", ".md")


class DocumentError(Exception):
    """Base class for extraction failures. Neither subclass is retried."""


class UnsupportedFormatError(DocumentError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"The file type is not supported by the parser: {path.name}")


class DocumentParsingError(DocumentError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"An error occurred while parsing {path.name}: {reason}")


class DocumentParser:
    """Default document-text extraction service, dispatching on file suffix."""

    def __init__(self):
        self._readers = {
            ".pdf": self._read_pdf,
            ".docx": self._read_docx,
        }
        for suffix in TEXT_SUFFIXES:
            self._readers[suffix] = self._read_text

    @property
    def supported_suffixes(self) -> list[str]:
        return sorted(self._readers)

    def extract_plain_text(self, path: str | Path) -> str:
        path = Path(path)
        reader = self._readers.get(path.suffix.lower())
        if reader is None:
            raise UnsupportedFormatError(path)
        text = reader(path)
        logger.debug("Extracted %d chars from %s", len(text), path.name)
        return text

    def _read_pdf(self, path: Path) -> str:
        laparams = LAParams(
            line_margin=0.3,  # Tighter for legal documents
            word_margin=0.1,
            char_margin=2.0,
            boxes_flow=0.5,
        )
        try:
            text = extract_text(str(path), laparams=laparams)
        except (PSException, OSError, ValueError) as e:
            raise DocumentParsingError(path, f"could not read PDF ({e})") from e
        if len(text.strip()) < 100:
            logger.warning("Low text extraction from %s; may be a scanned PDF", path.name)
        return text

    def _read_docx(self, path: Path) -> str:
        try:
            document = docx.Document(str(path))
        except (PackageNotFoundError, BadZipFile, KeyError, OSError) as e:
            raise DocumentParsingError(path, f"could not read Word document ({e})") from e
        parts = [para.text for para in document.paragraphs]
        for table in document.tables:
            for row in table.rows:
                parts.append(" ".join(cell.text for cell in row.cells))
        return "\n".join(parts)

    def _read_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentParsingError(path, f"could not read text file ({e})") from e
