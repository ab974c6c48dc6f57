"""Numeral Decoder — диспетчер по языку."""

from typing import Optional

from src.codec.decoder_en import decode_english
from src.codec.decoder_ja import decode_japanese
from src.core.domain.language import Language


def decode(text: str, language: Language) -> Optional[int]:
    """
    Текст числительного → число.

    Никогда не бросает exception для некорректного текста: нераспознанный
    ввод возвращает None.

    Args:
        text: Текст ответа (хирагана / смешанная запись / английские слова)
        language: Язык текста

    Returns:
        Неотрицательное целое или None
    """
    if language == Language.JA:
        return decode_japanese(text)
    return decode_english(text)
