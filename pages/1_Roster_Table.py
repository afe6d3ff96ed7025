# FILE: pages/1_Roster_Table.py
import streamlit as st

from puppy_bowl.config import ROSTER_KEY
from puppy_bowl.io import roster_csv_bytes, roster_to_dataframe

st.title("Roster Table")
if ROSTER_KEY not in st.session_state:
    st.warning("No roster fetched yet. Open the main page first.")
    st.stop()
if st.session_state[ROSTER_KEY] is None:
    st.warning("The last roster fetch failed. Use Reload roster on the main page.")
    st.stop()

df = roster_to_dataframe(st.session_state[ROSTER_KEY])
if df.empty:
    st.write("No players on the roster.")
else:
    st.dataframe(df, width="stretch", hide_index=True)

st.download_button(
    "Download roster.csv",
    data=roster_csv_bytes(df),
    file_name="roster.csv",
    mime="text/csv",
)
