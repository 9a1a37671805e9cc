import asyncio
import base64
import logging
from datetime import date

import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv

from memora_hanzi.config.dependencies import create_dependencies
from memora_hanzi.config.settings import Settings
from memora_hanzi.constants import APP_NAME, ARXIV_DISCLAIMER_TEXT
from memora_hanzi.errors import MemoraHanziError
from memora_hanzi.speech import button_label, speech_script
from memora_hanzi.workflows.name_processing import build_author_classifier, build_pipeline

# Load environment variables
load_dotenv()

st.set_page_config(
    page_title=APP_NAME,
    page_icon="🀄",
    layout="centered"
)


@st.cache_resource
def get_settings():
    return Settings()


# Each browser session runs its script in its own thread, so the event loop
# and the clients bound to it are kept per session.
if "event_loop" not in st.session_state:
    st.session_state.event_loop = asyncio.new_event_loop()
if "deps" not in st.session_state:
    st.session_state.deps = create_dependencies(get_settings())


def run_async(coro):
    return st.session_state.event_loop.run_until_complete(coro)


def data_uri_to_bytes(data_uri):
    """Decode the base64 payload of a data URI."""
    _, _, payload = data_uri.partition(",")
    return base64.b64decode(payload)


deps = st.session_state.deps

# Session state
if "pipelines" not in st.session_state:
    st.session_state.pipelines = {
        "direct": build_pipeline(deps),
        "arxiv": build_pipeline(deps),
    }
if "authors" not in st.session_state:
    st.session_state.authors = []
if "author_error" not in st.session_state:
    st.session_state.author_error = None
if "selected_author" not in st.session_state:
    st.session_state.selected_author = None
if "pending_speech" not in st.session_state:
    st.session_state.pending_speech = ""


def speak(text):
    """Queue browser speech for the next render."""
    st.session_state.pending_speech = speech_script(text, deps.settings.speech_language)


def play_pending_speech():
    script = st.session_state.pending_speech
    if script:
        components.html(script, height=0)
        st.session_state.pending_speech = ""


def render_name_details(pipeline, key_prefix):
    """Pinyin, editable keywords and the mnemonic image for the active name."""
    record = pipeline.record
    if record is None:
        return

    st.markdown("---")
    st.subheader(f"Processing: {record.original_name}")

    if record.error:
        st.error(record.error)

    # Pinyin section
    st.markdown("#### Pinyin & Pronunciation")
    if record.pinyin:
        st.markdown(f"## {record.pinyin}")
        syllables = record.syllables or []
        if syllables:
            cols = st.columns(len(syllables))
            for i, syllable in enumerate(syllables):
                with cols[i]:
                    st.button(
                        f"🔊 {button_label(syllable)}",
                        key=f"{key_prefix}_syllable_{i}",
                        on_click=speak,
                        args=(syllable,)
                    )
        st.button(
            "🔊 Pronounce Full Name",
            key=f"{key_prefix}_full_name",
            on_click=speak,
            args=(record.pinyin,)
        )
    elif not record.error:
        st.caption("Enter a name to see Pinyin.")

    if not record.pinyin:
        return

    # Keywords section
    st.markdown("#### Associative Keywords")
    keywords = pipeline.keywords.as_list()
    if keywords:
        cols = st.columns(min(len(keywords), 4))
        for i, keyword in enumerate(keywords):
            with cols[i % len(cols)]:
                st.button(
                    f"{keyword}  ✕",
                    key=f"{key_prefix}_remove_{i}_{keyword}",
                    help="Remove keyword",
                    on_click=pipeline.remove_keyword,
                    args=(keyword,)
                )
    else:
        st.caption("No keywords yet. AI will suggest some, or add your own!")

    with st.form(f"{key_prefix}_add_keyword_form", clear_on_submit=True):
        custom_keyword = st.text_input("Add custom keyword", key=f"{key_prefix}_custom_keyword")
        if st.form_submit_button("Add"):
            if pipeline.add_keyword(custom_keyword):
                st.rerun()

    if not pipeline.keywords:
        st.warning("Add some keywords to enable image generation.")
        return

    # Image section
    st.markdown("#### Memorable Image")
    label = "Regenerate Image" if record.image_url else "Generate Image"
    if st.button(label, key=f"{key_prefix}_generate_image", disabled=pipeline.is_busy, use_container_width=True):
        with st.spinner("Creating your visual memory aid..."):
            run_async(pipeline.generate_image())
        st.rerun()

    if record.image_url:
        st.image(data_uri_to_bytes(record.image_url), caption=f"Visual association for {record.original_name}")
    elif not record.error:
        st.caption('Click "Generate Image" to create a visual.')


def render_direct_input_tab():
    pipeline = st.session_state.pipelines["direct"]

    with st.form("direct_input_form"):
        name_input = st.text_input(
            "Enter Chinese Name (Hanzi or Pinyin)",
            placeholder="e.g., 张伟 or Zhāng Wěi"
        )
        submitted = st.form_submit_button("Process Name")

    if submitted:
        with st.spinner("Getting Pinyin and brainstorming keywords..."):
            run_async(pipeline.submit(name_input))

    render_name_details(pipeline, "direct")


def analyze_authors(author_input):
    st.session_state.selected_author = None
    st.session_state.author_error = None
    classifier = build_author_classifier(deps)
    try:
        st.session_state.authors = run_async(classifier.classify_authors(author_input))
    except MemoraHanziError as e:
        logging.error(f"Author analysis failed: {str(e)}")
        st.session_state.author_error = f"Failed to analyze authors: {str(e)}"
        st.session_state.authors = []


def render_arxiv_helper_tab():
    pipeline = st.session_state.pipelines["arxiv"]

    author_input = st.text_area(
        "Paste arXiv Author List",
        placeholder="e.g., Yiming Chen, John Smith, Xiaohua Li",
        help="Separate names with commas, semicolons, or new lines.",
        height=140
    )
    if st.button("Analyze Authors", use_container_width=True):
        with st.spinner("Identifying potentially Chinese names..."):
            analyze_authors(author_input)

    st.info(ARXIV_DISCLAIMER_TEXT)

    if st.session_state.author_error:
        st.error(st.session_state.author_error)

    if st.session_state.authors:
        st.markdown("#### Author List")
        st.caption("Click a name to process it. Highlighted names are AI-identified as potentially Chinese.")
        for author in st.session_state.authors:
            label = f"{author.name} (Potential)" if author.is_potentially_chinese else author.name
            if st.button(
                label,
                key=f"author_{author.id}",
                type="primary" if author.is_potentially_chinese else "secondary",
                use_container_width=True
            ):
                st.session_state.selected_author = author.name
                with st.spinner(f"Processing {author.name}..."):
                    run_async(pipeline.submit(author.name))

    if st.session_state.selected_author:
        render_name_details(pipeline, "arxiv")


# Main application layout
st.title(APP_NAME)
st.caption("Remember Chinese names with Pinyin, keywords and a picture")

if not deps.is_configured:
    st.error("GEMINI_API_KEY environment variable not found. Please ensure it is set; AI features are disabled.")

direct_tab, arxiv_tab = st.tabs(["Direct Input", "arXiv Helper"])
with direct_tab:
    render_direct_input_tab()
with arxiv_tab:
    render_arxiv_helper_tab()

play_pending_speech()

st.markdown("---")
st.caption(f"© {date.today().year} {APP_NAME}. For educational and entertainment purposes only.")
