"""
Streamlit Frontend for Deeday

The page families use to keep track of birthdays.

DESIGN PRINCIPLES:
1. One page: add form on the left, birthday list on the right
2. Nothing pops up on errors; missing fields simply do nothing
3. Search only changes what is shown, never what is stored

Run with:
    streamlit run app/main.py
"""

import html
from datetime import date

import streamlit as st

from deeday.orchestrator import (
    APP_NAME,
    APP_TAGLINE,
    BirthdayBoard,
    create_app_components,
    footer_lines,
)


# Page configuration
st.set_page_config(
    page_title=APP_NAME,
    page_icon="🎂",
    layout="wide",
)

# Custom CSS for better UX
st.markdown("""
<style>
    .stButton>button {
        width: 100%;
    }
    .member-card {
        padding: 12px 16px;
        background-color: #f9fafb;
        border-radius: 8px;
        margin: 6px 0;
    }
    .member-name {
        font-weight: 600;
        color: #1f2937;
    }
    .member-relationship {
        color: #4b5563;
        font-size: 0.9em;
    }
    .member-status {
        color: #7c3aed;
        font-size: 0.9em;
    }
    .footer {
        text-align: center;
        color: #6b7280;
        font-size: 0.8em;
        margin-top: 40px;
    }
</style>
""", unsafe_allow_html=True)

NAME_KEY = "member_name"
BIRTHDATE_KEY = "member_birthdate"
RELATIONSHIP_KEY = "member_relationship"
SEARCH_KEY = "search_term"


@st.cache_resource
def get_components():
    """Get or create application components (cached)."""
    try:
        return create_app_components(use_storage=True)
    except Exception as e:
        st.error(f"Failed to initialize storage, keeping birthdays in memory: {e}")
        return create_app_components(use_storage=False)


def handle_submit(board: BirthdayBoard) -> None:
    """Add the member from the form; clear the form only on success."""
    member = board.submit_member(
        st.session_state.get(NAME_KEY),
        st.session_state.get(BIRTHDATE_KEY),
        st.session_state.get(RELATIONSHIP_KEY),
    )
    if member is not None:
        st.session_state[NAME_KEY] = ""
        st.session_state[BIRTHDATE_KEY] = None
        st.session_state[RELATIONSHIP_KEY] = ""


def main():
    """Main application entry point."""
    board, _ = get_components()

    st.title(f"📅 {APP_NAME}")
    st.markdown(APP_TAGLINE)

    col1, col2 = st.columns(2)

    with col1:
        render_add_form(board)

    with col2:
        render_birthday_list(board)

    copyright_line, modified_line = footer_lines()
    st.markdown(f"""
    <div class="footer">
        <p>{copyright_line}</p>
        <p>{modified_line}</p>
    </div>
    """, unsafe_allow_html=True)


def render_add_form(board: BirthdayBoard):
    """Render the add-member form."""
    st.subheader("👤 Add Family Member")

    # Birthday starts blank instead of today
    st.session_state.setdefault(BIRTHDATE_KEY, None)

    with st.form("add_member", clear_on_submit=False):
        st.text_input(
            "Name",
            key=NAME_KEY,
            placeholder="Enter name",
        )
        st.date_input(
            "Birthday",
            key=BIRTHDATE_KEY,
            min_value=date(1900, 1, 1),
            max_value=date.today(),
        )
        st.text_input(
            "Relationship",
            key=RELATIONSHIP_KEY,
            placeholder="e.g., Sister, Brother, Mom",
        )
        st.form_submit_button(
            "Add Member",
            type="primary",
            on_click=handle_submit,
            args=(board,),
        )


def render_birthday_list(board: BirthdayBoard):
    """Render the searchable birthday list."""
    st.subheader("🎁 Birthday List")

    search_term = st.text_input(
        "Search",
        key=SEARCH_KEY,
        placeholder="Search...",
        label_visibility="collapsed",
    )

    rows = board.visible_rows(search_term)

    empty_message = board.empty_state_message(rows)
    if empty_message:
        st.info(empty_message)
        return

    for row in rows:
        info_col, delete_col = st.columns([5, 1])
        with info_col:
            st.markdown(f"""
            <div class="member-card">
                <div class="member-name">{html.escape(row.member.name)}</div>
                <div class="member-relationship">{html.escape(row.member.relationship)}</div>
                <div class="member-status">{html.escape(row.status_line)}</div>
            </div>
            """, unsafe_allow_html=True)
        with delete_col:
            st.button(
                "🗑️",
                key=f"delete-{row.member.id}",
                help=f"Delete {row.member.name}",
                on_click=board.delete_member,
                args=(row.member.id,),
            )


if __name__ == "__main__":
    main()
