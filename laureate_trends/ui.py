# laureate_trends/ui.py
import io
import logging

import pandas as pd
import streamlit as st

from laureate_trends.aggregator import aggregate, max_count, to_wide_frame, year_domain
from laureate_trends.classifier import STEM_CATEGORIES, classify_records
from laureate_trends.data_loader import DataLoader
from laureate_trends.plotter import X_LABEL, build_line_figure, plot_time_series, selected_group

logger = logging.getLogger(__name__)

CHART_KEY = "trend_chart"
SOURCE = "Nobel Prize laureates, counted per award year"


def excel_download(table: pd.DataFrame, metadata: dict) -> io.BytesIO:
    towrite = io.BytesIO()
    with pd.ExcelWriter(towrite, engine="openpyxl") as writer:
        table.to_excel(writer, index=False, sheet_name="Data")
        md_df = pd.DataFrame(list(metadata.items()), columns=["Description", "Value"])
        md_df.to_excel(writer, index=False, sheet_name="Metadata")
    towrite.seek(0)
    return towrite


def run_app():
    logging.basicConfig(level=logging.INFO)

    # Configure page
    st.set_page_config(page_title="Laureate Trends", layout="wide")
    st.title("Laureate Trends")
    st.subheader("STEM vs Non-STEM, year by year.")

    # Load data; any failure here ends the run
    try:
        loader = DataLoader()
        df = loader.load()
    except (OSError, KeyError, ValueError) as exc:
        logger.exception("Could not load laureate data")
        st.error(f"Could not load laureate data: {exc}")
        st.stop()

    classified = classify_records(df)
    series = aggregate(classified)
    domain = year_domain(classified)
    y_max = max_count(series)

    # Highlight comes from the chart's last selection event
    highlighted = selected_group(st.session_state.get(CHART_KEY), series)

    st.header("Laureates per Year")
    st.write(
        f"{SOURCE}. STEM covers {', '.join(sorted(STEM_CATEGORIES))}; every other category is Non-STEM."
    )
    fig = build_line_figure(series, domain, y_max, highlighted=highlighted)
    plot_time_series(fig, key=CHART_KEY)

    if not series:
        st.info("No laureates with a valid year in the data.")
        return

    # Yearly table; a year missing for a group stays empty
    table_display = to_wide_frame(series).rename(columns={"year": X_LABEL})
    st.subheader("Data Table")
    st.dataframe(table_display, hide_index=True)

    # Download data with metadata
    start_year, end_year = domain
    metadata = {
        "Source": SOURCE,
        "Data file": loader.file_path.name,
        "STEM categories": ", ".join(sorted(STEM_CATEGORIES)),
        "Years": f"{start_year} to {end_year}",
        "Records": len(classified),
    }
    st.download_button(
        label="📥 Download data as Excel",
        data=excel_download(table_display, metadata),
        file_name=f"laureates_{start_year}_to_{end_year}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )

    # Footer disclaimer
    st.markdown(
        """
        <div style='font-size:12px; color:gray; text-align:center; padding-top:20px;'>
        Counts are laureates per award year; shared prizes count every laureate.<br>
        Years with no laureates in a group are left out of that group's line rather than drawn as zero.
        </div>
        """,
        unsafe_allow_html=True
    )
