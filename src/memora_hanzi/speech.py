"""Browser speech playback.

Speech synthesis happens in the user's browser. This module only renders
the script that asks the browser to speak.
"""

import json

from .constants import DEFAULT_SPEECH_LANGUAGE

_SPEECH_TEMPLATE = """<script>
(function() {{
  const synth = window.speechSynthesis;
  if (!synth) {{
    console.warn('Speech synthesis not available.');
    return;
  }}
  const text = {text};
  const lang = {lang};
  synth.cancel();
  const utterance = new SpeechSynthesisUtterance(text);
  utterance.lang = lang;
  const voices = synth.getVoices();
  const prefix = lang.split('-')[0];
  const voice = voices.find(v => v.lang === lang) || voices.find(v => v.lang.startsWith(prefix));
  if (voice) {{
    utterance.voice = voice;
  }} else {{
    console.warn('No voice found for lang ' + lang + '. Using default.');
  }}
  synth.speak(utterance);
}})();
</script>"""


def _js_string(value: str) -> str:
    # Escape "</" so the value cannot close the surrounding script tag
    return json.dumps(value).replace("</", "<\\/")


def speech_script(text: str, lang: str = DEFAULT_SPEECH_LANGUAGE) -> str:
    """Return an HTML ``<script>`` that speaks ``text`` in ``lang``.

    An exact voice-language match is preferred, then a match on the language
    prefix (``zh`` for ``zh-CN``). Blank text gives an empty string.
    """
    if not text or not text.strip():
        return ""
    return _SPEECH_TEMPLATE.format(text=_js_string(text), lang=_js_string(lang))


def button_label(text: str, limit: int = 15) -> str:
    """Shorten long text for a pronunciation button."""
    return text if len(text) <= limit else text[:12] + "..."
