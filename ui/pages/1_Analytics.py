"""
Analytics - Pipeline metrics and health re-analysis.
"""

import streamlit as st

st.set_page_config(page_title="Analytics", page_icon="📈", layout="wide")

st.title("Analytics")

try:
    from pipenet.pipelines import PipelineNetwork
    from ui.components.charts import create_health_bar_chart, create_metrics_chart

    if "network" not in st.session_state:
        st.session_state.network = PipelineNetwork.from_sample()
    network = st.session_state.network
    pipelines = network.pipelines

    if not pipelines:
        st.warning("No pipelines. Draw one on the Route page.")
        st.stop()

    stats = network.summary()
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total Pipelines", stats.total_pipelines)
    c2.metric("Average Health", f"{stats.average_health}%")
    c3.metric("Total Leakages", stats.total_leakages)
    c4.metric("Total Length", f"{stats.total_length:.1f} km")

    st.divider()

    col1, col2 = st.columns(2)

    with col1:
        st.plotly_chart(create_metrics_chart(pipelines), use_container_width=True)

    with col2:
        st.plotly_chart(create_health_bar_chart(pipelines), use_container_width=True)

    st.divider()

    rows = []
    for p in pipelines:
        rows.append({
            "ID": p.id,
            "Length (km)": p.length,
            "Material": p.material,
            "Health": f"{p.health}%" + (" (AI)" if p.ai_analyzed else ""),
            "Leakages": p.leakages,
            "Pressure (PSI)": p.pressure,
            "Flow (m³/h)": p.flow_rate,
            "Last Inspection": p.last_inspection,
        })
    st.dataframe(rows, use_container_width=True, hide_index=True)

    selected = st.selectbox("Pipeline", [p.id for p in pipelines], format_func=lambda i: f"Pipeline #{i}")
    if st.button("Analyze Pipeline Health (AI)"):
        with st.spinner("Analyzing..."):
            updated = network.analyze_health(selected)
        # Shown after the rerun below
        st.session_state.analysis_message = f"Pipeline #{updated.id} health is now {updated.health}%"
        st.rerun()

    message = st.session_state.pop("analysis_message", None)
    if message:
        st.success(message)

except ImportError as e:
    st.error(f"Missing: {e}")
