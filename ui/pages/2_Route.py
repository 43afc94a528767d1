"""
Route - Network map, shortest path, and pipeline drawing.
"""

import streamlit as st

st.set_page_config(page_title="Route", page_icon="🧭", layout="wide")

st.title("Route")

try:
    from pipenet.config import DEFAULT_ROUTE_FINISH, DEFAULT_ROUTE_START
    from pipenet.graph import GraphError
    from pipenet.pipelines import PipelineNetwork
    from ui.components.charts import create_network_map

    if "network" not in st.session_state:
        st.session_state.network = PipelineNetwork.from_sample()
    network = st.session_state.network
    node_ids = [n.id for n in network.nodes]

    col1, col2, col3 = st.columns([2, 2, 1])
    start = col1.selectbox(
        "Start", node_ids,
        index=node_ids.index(DEFAULT_ROUTE_START) if DEFAULT_ROUTE_START in node_ids else 0,
    )
    finish = col2.selectbox(
        "Finish", node_ids,
        index=node_ids.index(DEFAULT_ROUTE_FINISH) if DEFAULT_ROUTE_FINISH in node_ids else 0,
    )
    col3.write("")
    if col3.button("Find Shortest Path", type="primary", use_container_width=True):
        st.session_state.route = network.find_route(start, finish)

    route = st.session_state.get("route")
    if route is not None:
        if route.reachable:
            st.success(f"{' → '.join(route.path)}  ({route.distance:.2f} km)")
        else:
            st.warning(f"No path from {route.start} to {route.finish}")

    st.plotly_chart(create_network_map(network, route), use_container_width=True)

    st.divider()
    st.subheader("Draw Pipeline")
    message = st.session_state.pop("draw_message", None)
    if message:
        st.success(message)
    st.caption("One point per line as lat,lon. Points on an existing node join the pipeline to it.")
    text = st.text_area("Points", placeholder="51.515,-0.11\n51.52,-0.08")
    if st.button("Add Pipeline"):
        points = []
        for line in text.splitlines():
            if line.strip():
                lat, lon = line.split(",")
                points.append((float(lat), float(lon)))
        try:
            pipeline = network.draw_pipeline(points)
            st.session_state.pop("route", None)
            st.session_state.draw_message = f"Added pipeline #{pipeline.id} ({pipeline.length} km)"
            st.rerun()
        except GraphError as e:
            st.error(str(e))

except ValueError as e:
    st.error(f"Invalid point: {e}")
