"""Scribe -- Streamlit UI.

Upload an audio file, transcribe it through the Scribe API, and browse the
speaker-segmented result alongside this session's transcription history.
"""

from __future__ import annotations

from datetime import datetime

import streamlit as st

from scribe.pipeline_config import ViewMode
from scribe.transcription.formatting import (
    format_duration,
    format_timestamp,
    format_transcript_text,
)
from scribe.transcription.languages import SUPPORTED_LANGUAGES
from scribe.transcription.validation import AUDIO_EXTENSIONS, validate_audio_file
from scribe.ui.api_client import check_health, get_languages, to_transcript, transcribe_file
from scribe.ui.history import SavedTranscription, TranscriptionHistory

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Scribe", layout="wide")

if "history" not in st.session_state:
    st.session_state.history = TranscriptionHistory()
if "current_id" not in st.session_state:
    st.session_state.current_id = None

history: TranscriptionHistory = st.session_state.history


def _format_saved_at(timestamp: float) -> str:
    saved_at = datetime.fromtimestamp(timestamp)
    if saved_at.date() == datetime.now().date():
        return saved_at.strftime("%H:%M")
    return saved_at.strftime("%b %d, %H:%M")


def _show_transcription(saved: SavedTranscription) -> None:
    transcript = to_transcript(saved.transcription)

    st.header(saved.file_name)
    col_a, col_b, col_c = st.columns(3)
    col_a.metric("Duration", format_duration(transcript.duration))
    col_b.metric("Language", transcript.language.upper())
    col_c.metric("Speakers", str(transcript.speakers))

    view = ViewMode.PLAIN
    if transcript.speakers > 1:
        view = ViewMode(
            st.radio(
                "View",
                options=[m.value for m in ViewMode],
                format_func=lambda x: "Speaker view" if x == "speaker" else "Plain text",
                horizontal=True,
                key=f"view_{saved.id}",
            )
        )

    if view is ViewMode.SPEAKER and transcript.segments:
        for segment in transcript.segments:
            st.markdown(f"**Speaker {segment.speaker + 1}:** {segment.text}")
            st.caption(f"{format_timestamp(segment.start)} - {format_timestamp(segment.end)}")
    else:
        st.write(transcript.text)

    st.download_button(
        "Download",
        data=format_transcript_text(transcript, view),
        file_name=f"{saved.file_name.rsplit('.', 1)[0]}_transcript.txt",
        mime="text/plain",
    )

    if transcript.words:
        with st.expander(f"Word-level timestamps ({len(transcript.words)} words)"):
            for word in transcript.words:
                st.write(
                    f"`{format_timestamp(word.start)} - {format_timestamp(word.end)}` "
                    f"{word.text}"
                )


# ---------------------------------------------------------------------------
# Sidebar -- API status + history
# ---------------------------------------------------------------------------
with st.sidebar:
    st.title("Scribe")
    st.markdown("---")

    # API connection indicator
    api_healthy = check_health()
    if api_healthy:
        st.markdown(":green_circle: API connected")
    else:
        st.markdown(":red_circle: API unreachable")

    if st.button("New transcription"):
        st.session_state.current_id = None

    st.markdown("---")
    st.subheader(f"History ({len(history)})")

    for item in history.items:
        col_open, col_delete = st.columns([4, 1])
        label = f"{item.file_name} · {_format_saved_at(item.timestamp)}"
        if col_open.button(label, key=f"open_{item.id}"):
            st.session_state.current_id = item.id
        if col_delete.button("✕", key=f"delete_{item.id}"):
            history.delete(item.id)
            if st.session_state.current_id == item.id:
                st.session_state.current_id = None
            st.rerun()

    if len(history) and st.button("Clear all"):
        history.clear()
        st.session_state.current_id = None
        st.rerun()

# ---------------------------------------------------------------------------
# Main -- selected transcription or upload form
# ---------------------------------------------------------------------------
current = history.get(st.session_state.current_id) if st.session_state.current_id else None

if current is not None:
    _show_transcription(current)
else:
    st.header("Upload Audio File")

    languages = get_languages() if api_healthy else []
    language_options = {lang["code"]: lang["name"] for lang in languages} or dict(
        SUPPORTED_LANGUAGES
    )
    language: str = st.selectbox(
        "Language",
        options=list(language_options.keys()),
        format_func=lambda code: language_options[code],
    )

    uploaded_file = st.file_uploader(
        "Choose an audio file",
        type=[ext.lstrip(".") for ext in AUDIO_EXTENSIONS],
    )

    validation_error: str | None = None
    if uploaded_file is not None:
        result = validate_audio_file(uploaded_file)
        validation_error = result.error
        if validation_error:
            st.error(validation_error)
        else:
            st.caption(f"{uploaded_file.name} ({uploaded_file.size / (1024 * 1024):.2f} MB)")

    if st.button("Transcribe", disabled=uploaded_file is None or validation_error is not None):
        if not api_healthy:
            st.error("Cannot transcribe: the API server is not reachable.")
        elif uploaded_file is not None:
            with st.spinner("Uploading and transcribing..."):
                payload = transcribe_file(
                    file_content=uploaded_file.getvalue(),
                    filename=uploaded_file.name,
                    language=language,
                    content_type=uploaded_file.type,
                )
            if payload:
                saved = history.add(payload, uploaded_file.name)
                st.session_state.current_id = saved.id
                st.rerun()
            # Error case is already handled inside transcribe_file via st.error
