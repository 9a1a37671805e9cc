"""Prompt templates for the Gemini calls."""

from langchain_core.prompts import PromptTemplate

PINYIN_PROMPT = PromptTemplate.from_template(
    'Provide the Pinyin with tone marks for the Chinese name: "{hanzi_name}". '
    'Structure your response as a JSON object with a single key "pinyin" containing '
    'the Pinyin string. For example, for "张伟", respond with {{"pinyin": "Zhāng Wěi"}}. '
    "Ensure syllables are space-separated."
)

KEYWORDS_PROMPT = PromptTemplate.from_template(
    'For the Pinyin name "{pinyin_name}", brainstorm 3-5 English phonetic associations '
    "or common meanings for its syllables. Focus on concrete, visualizable nouns or simple "
    'actions. Provide these keywords as a JSON object with a single key "keywords" which '
    'is an array of strings. For example, for "Měi Lì", respond with '
    '{{"keywords": ["beautiful flower", "power", "dew"]}}.'
)

IMAGE_PROMPT = PromptTemplate.from_template(
    "Create a whimsical, lighthearted, and memorable cartoon-style image representing a "
    "person associated with the name '{original_name}' (pronounced roughly as "
    "'{pinyin_name}'). Incorporate visual elements inspired by these concepts: "
    "{keyword_string}. The image should be fun and serve as a memory aid. Avoid text in "
    "the image unless it is naturally part of a scene (e.g., a sign). Focus on a single "
    "character if a person is depicted."
)

AUTHOR_CLASSIFICATION_PROMPT = PromptTemplate.from_template(
    "From the following list of author names (separated by commas or newlines): "
    '"{author_list}". Identify names that are likely to be of Chinese origin based on '
    "common Chinese surnames and typical Pinyin name structures. This is a heuristic and "
    "not a definitive identification of ethnicity. Respond with a JSON object containing a "
    'single key "identifiedNames", which is an array of strings. Each string should be a '
    "name identified as potentially Chinese. For example, if the input is "
    '"Yiming Chen, John Smith, Xiaohua Li", the output should be '
    '{{"identifiedNames": ["Yiming Chen", "Xiaohua Li"]}}. If no names are identified, '
    'return {{"identifiedNames": []}}.'
)
