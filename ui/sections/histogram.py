# ui/sections/histogram.py
import streamlit as st


def render_histogram(frames) -> None:
    st.subheader("Many small, few large")

    hist = frames["histogram"].copy()
    # numeric bin keeps the bars in threshold order
    hist.insert(0, "bin", range(1, len(hist) + 1))

    col1, col2 = st.columns([3, 2])
    with col1:
        st.bar_chart(hist, x="bin", y="count", x_label="Revenue bucket", y_label="Customers")
    with col2:
        st.dataframe(
            hist.rename(columns={"bucketLabel": "Revenue from", "count": "Customers"}),
            hide_index=True,
            use_container_width=True,
        )
