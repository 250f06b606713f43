from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract shared by the PDF, Word, HTML and plain-text adapters.

    Adapters see only the bytes; choosing one by MIME type is
    TextExtractor's job. Each adapter must be a pure function of its input
    so repeated extraction of one upload yields identical text.
    """

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Extract plain text from raw file bytes.

        Args:
            data: Raw file content.

        Returns:
            Extracted text as a single string.

        Raises:
            ExtractionError: if the bytes cannot be decoded for this format.
        """
