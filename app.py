import html

import pandas as pd
import streamlit as st
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from plagiarism_detector.core.config import load_settings
from plagiarism_detector.core.cosine_similarity import WordFrequencySimilarityCalculator
from plagiarism_detector.core.document_loader import DocumentLoader
from plagiarism_detector.core.logging_config import get_logger, setup_logging
from plagiarism_detector.core.validation import InputUnreadableError, ValidationError

SETTINGS = load_settings(dotenv=False)

setup_logging(
    log_level=SETTINGS.log_level,
    log_dir=SETTINGS.log_dir,
    structured_logging=SETTINGS.structured_logging,
    enable_console=True,
    enable_file=SETTINGS.log_to_file
)

logger = get_logger(__name__)

TEXT_FILE_TYPES = ["txt", "md", "py", "java", "c", "cpp", "js", "ts", "html", "css", "csv", "json"]


def initialize_session_state():
    """Initialize all session state variables."""
    if "last_result" not in st.session_state:
        st.session_state.last_result = None
    if "compared_files" not in st.session_state:
        st.session_state.compared_files = None


def initialize_app():
    """Setup the Streamlit page configuration and styling."""
    st.set_page_config(
        page_title="Plagiarism Detector",
        page_icon="🔎",
        layout="centered",
    )
    st.markdown("""
    <style>
        .result-card {
            padding: 1.25rem;
            border-radius: 0.75rem;
            background: #f8fafc;
            border: 1px solid #e2e8f0;
            margin-bottom: 1rem;
        }
        .result-card h3 { color: #1d4ed8; margin: 0; }
    </style>
    """, unsafe_allow_html=True)
    st.title("🔎 Plagiarism Detector")
    st.caption("Compares two text files by how often they use the same words.")
    initialize_session_state()


def shared_words_frame(result, limit: int = 25) -> pd.DataFrame:
    """Tabulate the shared words that contribute most to the score."""
    rows = [
        {"Word": word, "First file": count_a, "Second file": count_b, "Contribution": count_a * count_b}
        for word, count_a, count_b in result.shared_words[:limit]
    ]
    return pd.DataFrame(rows, columns=["Word", "First file", "Second file", "Contribution"])


def run_comparison(first_file, second_file, threshold: float):
    """Compare the two uploads and keep the result in session state."""
    try:
        calculator = WordFrequencySimilarityCalculator(
            threshold=threshold,
            loader=DocumentLoader(max_file_size_mb=SETTINGS.max_file_size_mb)
        )
        result = calculator.compare(first_file, second_file)
    except InputUnreadableError as e:
        logger.warning(f"Comparison aborted: {e.message}", extra={'label': e.label})
        st.session_state.last_result = None
        st.error(f"Error reading files: {e.message}")
        return None
    except ValidationError as e:
        st.session_state.last_result = None
        st.error(f"❌ Invalid input: {e.message}")
        return None

    st.session_state.last_result = result
    st.session_state.compared_files = (first_file.name, second_file.name)
    return result


def result_card_html(result, file_names) -> str:
    """Result card markup; upload names are user input and get escaped."""
    first, second = (html.escape(name or "") for name in file_names)
    return f"""
        <div class="result-card">
            <h3>{html.escape(result.summary())}</h3>
            <p>{first} ↔ {second}</p>
        </div>
        """


def display_result(result, file_names):
    st.markdown(result_card_html(result, file_names), unsafe_allow_html=True)

    col1, col2 = st.columns(2)
    col1.metric("Similarity", f"{result.similarity_percent:.2f}%")
    col2.metric("Threshold", f"{result.threshold:.2f}%")

    if result.flagged:
        st.warning(f"⚠️ {result.verdict()}")
    else:
        st.success(f"✅ {result.verdict()}")

    st.markdown("### Shared words")
    if result.shared_words:
        st.dataframe(shared_words_frame(result), hide_index=True)
    else:
        st.info("The files have no words in common.")


def main():
    """Main application function."""
    initialize_app()

    first_file = st.file_uploader("Select First File:", type=TEXT_FILE_TYPES, key="first_file")
    second_file = st.file_uploader("Select Second File:", type=TEXT_FILE_TYPES, key="second_file")

    st.sidebar.markdown("### ⚙️ Settings")
    threshold = st.sidebar.slider(
        "Plagiarism threshold (%)",
        min_value=0.0,
        max_value=100.0,
        value=float(SETTINGS.threshold),
        step=0.5,
    )

    if st.button("Check Similarity", type="primary"):
        if first_file is None or second_file is None:
            st.error("Please select both files to compare.")
        else:
            run_comparison(first_file, second_file, threshold)

    if st.session_state.last_result is not None:
        display_result(st.session_state.last_result, st.session_state.compared_files)


if __name__ == "__main__":
    main()
