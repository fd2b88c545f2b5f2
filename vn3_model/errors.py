"""
vn3_model/errors.py — błędy zgłaszane użytkownikowi.

Segmentacja i dopasowanie reguł nigdy nie zgłaszają błędów; dotyczy to
wyłącznie dekodowania PDF i pobierania dokumentu z sieci.
"""

from __future__ import annotations


class Vn3Error(Exception):
    """Bazowa klasa błędów z czytelnym komunikatem dla użytkownika."""

    default_message = "処理に失敗しました。"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class DecodeFailure(Vn3Error):
    """Dane nie są poprawnym PDF (albo dekoder się wysypał)."""

    default_message = "PDFの解析に失敗しました。PDFファイルが正しいか確認してください。"


class NetworkFailure(Vn3Error):
    """Pobieranie nie powiodło się lub zwróciło coś innego niż dokument."""

    default_message = "ファイルの取得に失敗しました。URLを確認してください。"


class AccessDenied(NetworkFailure):
    """Serwer zwrócił stronę HTML zamiast PDF (zwykle brak uprawnień)."""

    default_message = (
        "PDFとして読み込めませんでした。"
        "Google Driveのアクセス権限（リンクを知っている全員）を確認してください。"
    )

    def __init__(self, message: str | None = None, page_title: str | None = None) -> None:
        super().__init__(message)
        self.page_title = page_title
