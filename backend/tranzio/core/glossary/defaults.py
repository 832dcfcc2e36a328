"""Built-in glossary used when no glossary file can be read."""

from typing import Dict

DEFAULT_GLOSSARY: Dict[str, Dict[str, str]] = {
    "hello": {
        "Spanish": "hola",
        "French": "bonjour",
        "German": "hallo",
        "Italian": "ciao",
        "Portuguese": "olá",
        "Russian": "привет",
        "Japanese": "こんにちは",
        "Korean": "안녕하세요",
        "Chinese": "你好",
        "Arabic": "مرحبا",
    },
    "goodbye": {
        "Spanish": "adiós",
        "French": "au revoir",
        "German": "auf wiedersehen",
        "Italian": "arrivederci",
        "Portuguese": "adeus",
        "Russian": "до свидания",
        "Japanese": "さようなら",
        "Korean": "안녕히 가세요",
        "Chinese": "再见",
        "Arabic": "مع السلامة",
    },
    "thank you": {
        "Spanish": "gracias",
        "French": "merci",
        "German": "danke",
        "Italian": "grazie",
        "Portuguese": "obrigado",
        "Russian": "спасибо",
        "Japanese": "ありがとう",
        "Korean": "감사합니다",
        "Chinese": "谢谢",
        "Arabic": "شكرا",
    },
    "yes": {
        "Spanish": "sí",
        "French": "oui",
        "German": "ja",
        "Italian": "sì",
        "Portuguese": "sim",
        "Russian": "да",
        "Japanese": "はい",
        "Korean": "네",
        "Chinese": "是",
        "Arabic": "نعم",
    },
    "no": {
        "Spanish": "no",
        "French": "non",
        "German": "nein",
        "Italian": "no",
        "Portuguese": "não",
        "Russian": "нет",
        "Japanese": "いいえ",
        "Korean": "아니요",
        "Chinese": "不",
        "Arabic": "لا",
    },
}
