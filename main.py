import streamlit as st

st.set_page_config(page_title="Income Dashboard", layout='wide')

pg = st.navigation(
    [
        st.Page("incdash/app/overview.py", title="Overview"),
    ]
)
pg.run()
