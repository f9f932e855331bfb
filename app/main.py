# app/main.py

import streamlit as st
from dotenv import load_dotenv
from services.content import CONTENT_TYPES, TYPE_LABELS


load_dotenv()


st.set_page_config(page_title="Brainvault", page_icon="🧠", layout="wide")


def main_page():
    from ui.login import logout
    from ui.dashboard import dashboard_page

    st.title(f"안녕하세요, {st.session_state['username']}님!")

    st.sidebar.markdown("## 📋 메뉴")

    if st.sidebar.button("🗂️ 전체"):
        st.session_state["type_filter"] = None
    for content_type in CONTENT_TYPES:
        if st.sidebar.button(TYPE_LABELS[content_type]):
            st.session_state["type_filter"] = content_type
    if st.sidebar.button("🔓 로그아웃"):
        logout()
        st.session_state.clear()
        st.rerun()

    dashboard_page()


share_hash = st.query_params.get("share")

if share_hash:
    # public view, no login or cookies needed
    from ui.shared import shared_page
    shared_page(share_hash)
else:
    from ui.login import login_page
    if "access_token" not in st.session_state:
        login_page()
    else:
        main_page()
