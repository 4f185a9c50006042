"""
LegalSimplify
Upload or paste a legal document, simplify it, and ask quick questions.
"""

import streamlit as st

from legal_simplify.config import load_settings
from legal_simplify.display import html_block
from legal_simplify.glossary import explain_terms
from legal_simplify.session import SimplifySession
from legal_simplify.summarizer import MAX_POINTS, MIN_POINTS

settings = load_settings()

# Page configuration
st.set_page_config(
    page_title="LegalSimplify",
    page_icon="⚖️",
    layout="wide",
)

# Custom CSS
st.markdown(
    """
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: 700;
        color: #1E3A5F;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        font-size: 1.1rem;
        color: #666;
        margin-bottom: 2rem;
    }
    .summary-point {
        padding: 0.25rem 0 0.25rem 0.75rem;
        border-left: 2px solid #1E3A5F;
        margin: 0.5rem 0;
    }
    .chat-answer {
        background-color: #f8f9fa;
        border-radius: 8px;
        padding: 0.75rem;
        margin: 0.25rem 0 1rem 0;
        border-left: 4px solid #1E3A5F;
    }
    .risk-item {
        background-color: #fff5f5;
        border-left: 4px solid #dc3545;
        border-radius: 8px;
        padding: 0.75rem;
        margin: 0.5rem 0;
    }
</style>
""",
    unsafe_allow_html=True,
)


def get_session() -> SimplifySession:
    """Return the session held in ``st.session_state``, creating it once."""
    if "simplify" not in st.session_state:
        st.session_state.simplify = SimplifySession(max_points=settings.max_points)
    return st.session_state.simplify


def on_text_change():
    get_session().load_text(st.session_state.document_input)


def on_upload():
    uploaded = st.session_state.uploaded_file
    session = get_session()
    if uploaded is None:
        return
    session.load_upload(uploaded.name, uploaded.getvalue())
    st.session_state.document_input = session.text


def on_ask():
    session = get_session()
    session.question = st.session_state.question_input
    session.ask()
    st.session_state.question_input = session.question


def render_inputs(session: SimplifySession):
    """Document and options panels."""
    col_doc, col_opts = st.columns([2, 1])

    with col_doc:
        st.markdown("### 📄 Document")
        if "document_input" not in st.session_state:
            st.session_state.document_input = session.text
        st.text_area(
            "Document",
            key="document_input",
            on_change=on_text_change,
            placeholder="Paste contract text here...",
            height=220,
            label_visibility="collapsed",
        )
        st.file_uploader(
            "Upload a text file",
            type=["txt"],
            key="uploaded_file",
            on_change=on_upload,
        )
        if session.uploaded_name:
            st.caption(session.uploaded_name)

    with col_opts:
        st.markdown("### ⚙️ Options")
        points = st.slider(
            "Summary points",
            min_value=MIN_POINTS,
            max_value=MAX_POINTS,
            value=session.max_points,
        )
        session.set_max_points(points)
        st.markdown(f"{session.max_points} summary points")
        if st.button("✨ Simplify", type="primary", use_container_width=True):
            session.generate_summary()


def render_outputs(session: SimplifySession):
    """Original text, summary and chatbot panels."""
    col_orig, col_summary, col_chat = st.columns(3)

    with col_orig:
        st.markdown("### Original")
        with st.container(height=360):
            st.text(session.text or "(No document uploaded)")

    with col_summary:
        st.markdown("### Simplified Summary")
        for point in session.summary_points:
            st.markdown(html_block(point, "summary-point"), unsafe_allow_html=True)
        terms = explain_terms(session.text)
        if terms:
            with st.expander("📖 Legal terms in this document"):
                for term, explanation in terms:
                    st.markdown(f"**{term}**: {explanation}")

    with col_chat:
        st.markdown("### 💬 Chatbot")
        st.text_input("Question", key="question_input", placeholder="Ask me anything...")
        st.button("Ask", on_click=on_ask)
        with st.container(height=300):
            for exchange in session.chat_log:
                st.markdown(
                    html_block(exchange.question, "chat-question", label="You:"),
                    unsafe_allow_html=True,
                )
                st.markdown(html_block(exchange.answer, "chat-answer"), unsafe_allow_html=True)


def render_risks(session: SimplifySession):
    st.markdown("### ⚠️ Detected Risks")
    risks = session.risks
    if not risks:
        st.caption("No risk keywords found.")
    for risk in risks:
        st.markdown(html_block(risk, "risk-item"), unsafe_allow_html=True)


def main():
    """Main application entry point."""
    session = get_session()

    st.markdown('<p class="main-header">⚖️ LegalSimplify</p>', unsafe_allow_html=True)
    st.markdown(
        '<p class="sub-header">Upload or paste a legal document, simplify it, and ask quick questions.</p>',
        unsafe_allow_html=True,
    )

    render_inputs(session)
    st.markdown("---")
    render_outputs(session)
    st.markdown("---")
    render_risks(session)


if __name__ == "__main__":
    main()
