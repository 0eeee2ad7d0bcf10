from __future__ import annotations


class ConversionError(Exception):
    """Base for every failure that ends a conversion with a message."""

    default_message = "Failed to convert PDF to Excel"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class DocumentUnreadable(ConversionError):
    default_message = "The PDF could not be opened or parsed."


class PageUnavailable(ConversionError):
    default_message = "The requested page is not available in this PDF."


class InvalidPageRange(ConversionError):
    default_message = "Invalid page range."


class InvalidOption(ConversionError):
    default_message = "Invalid conversion option."


class NoTabularContent(ConversionError):
    default_message = "No table data found in PDF. Make sure your PDF contains tabular data."


class EmitFailure(ConversionError):
    default_message = "Failed to write the Excel workbook."
