"""Stage experts used by the name processing pipeline and the author helper."""

from .pinyin_expert import PinyinExpert
from .keyword_brainstorm_expert import KeywordBrainstormExpert
from .mnemonic_image_expert import MnemonicImageExpert, build_image_prompt
from .author_classifier import AuthorClassifier

__all__ = [
    "PinyinExpert",
    "KeywordBrainstormExpert",
    "MnemonicImageExpert",
    "build_image_prompt",
    "AuthorClassifier",
]
