"""
Pipeline Management System
"""

import streamlit as st

from pipenet.pipelines import PipelineNetwork

st.set_page_config(page_title="Pipelines", page_icon="🛢️", layout="wide")

if "network" not in st.session_state:
    st.session_state.network = PipelineNetwork.from_sample()

st.title("Pipeline Management System")
st.caption("Monitor pipeline health and route flow through the network.")

col1, col2 = st.columns(2)

with col1:
    if st.button("📈 Analytics", use_container_width=True):
        st.switch_page("pages/1_Analytics.py")

with col2:
    if st.button("🧭 Route", use_container_width=True, type="primary"):
        st.switch_page("pages/2_Route.py")

st.divider()

stats = st.session_state.network.summary()
c1, c2, c3, c4 = st.columns(4)
c1.metric("Total Pipelines", stats.total_pipelines)
c2.metric("Average Health", f"{stats.average_health}%")
c3.metric("Total Leakages", stats.total_leakages)
c4.metric("Total Length", f"{stats.total_length:.1f} km")

if st.button("Refresh Data"):
    st.session_state.network = PipelineNetwork.from_sample()
    st.session_state.pop("route", None)
    st.rerun()
