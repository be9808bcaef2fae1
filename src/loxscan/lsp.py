"""Minimal LSP server for Lox: lexical diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from loxscan import __version__
from loxscan.errors import LexError
from loxscan.scanner import scan

server = LanguageServer(
    "loxscan-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def utf16_len(text: str) -> int:
    """Length of text in UTF-16 code units, the default LSP position encoding."""
    return sum(2 if ord(ch) > 0xFFFF else 1 for ch in text)


def to_diagnostic(err: LexError) -> Diagnostic:
    """Convert a LexError (1-based codepoints) into an LSP Diagnostic (0-based UTF-16)."""
    line = err.line - 1
    col = utf16_len(err.source_line()[: err.column - 1])
    width = max(1, utf16_len(err.text.split("\n", 1)[0]))
    return Diagnostic(
        range=Range(
            start=Position(line=line, character=col),
            end=Position(line=line, character=col + width),
        ),
        message=err.message,
        severity=DiagnosticSeverity.Error,
        source="loxscan",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish its diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    _, errors = scan(doc.source)
    diagnostics = [to_diagnostic(err) for err in errors]

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
