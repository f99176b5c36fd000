import logging
import sys
from pathlib import Path

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st
from plotly.subplots import make_subplots

# Add project root directory to Python path
current_dir = Path(__file__).resolve().parent
project_root = current_dir.parent
sys.path.insert(0, str(project_root))

from podostemum.configs.params import DEFAULT_SETTINGS, ORGAN_PARAMETERS
from podostemum.environment.site import constant_forcing
from podostemum.errors import DomainError
from podostemum.system.daily import calculate_site_table

# --- Page Config ---
st.set_page_config(
    page_title="Podostemum Biomass Budget Dashboard",
    page_icon="🌿",
    layout="wide",
    initial_sidebar_state="expanded",
)

# --- Logger ---
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


# --- Helper Functions ---
@st.cache_data
def run_budget(lat, start_day, end_day, temperature, depth, organs, prop_reflect, K, Kp, Bz, self_shading):
    """Evaluate the daily budget for constant site conditions."""
    forcing = constant_forcing(start_day, end_day, temperature, depth)
    return calculate_site_table(
        forcing,
        lat,
        organs=list(organs),
        prop_reflect=prop_reflect,
        K=K,
        Kp=Kp,
        Bz=Bz,
        self_shading=self_shading,
    )


def par_figure(light_df):
    """Surface and at-depth PAR at the three sampling times."""
    fig = make_subplots(rows=1, cols=2, subplot_titles=("Water surface", "At plant depth"))
    for col_idx, prefix in enumerate(["Surface PAR", "PAR at depth"], start=1):
        for column in [c for c in light_df.columns if c.startswith(prefix)]:
            label = column.replace(prefix, "").replace("(uE)", "").strip()
            fig.add_trace(
                go.Scatter(x=light_df["Day"], y=light_df[column], mode="lines", name=f"{prefix}: {label}"),
                row=1,
                col=col_idx,
            )
    fig.update_xaxes(title_text="Julian day")
    fig.update_yaxes(title_text="PAR (µE)")
    fig.update_layout(height=420, legend={"orientation": "h", "y": -0.2})
    return fig


# --- Sidebar ---
with st.sidebar:
    st.title("Site settings")
    lat = st.slider("Latitude (°)", -90.0, 90.0, float(DEFAULT_SETTINGS["latitude"]), 0.5)
    start_day, end_day = st.slider("Julian days", 1, 365, (1, 365))
    temperature = st.number_input("Water temperature (°C)", -5.0, 40.0, float(DEFAULT_SETTINGS["temperature"]))
    depth = st.number_input("Plant depth (m)", 0.0, 10.0, float(DEFAULT_SETTINGS["depth"]), 0.05)

    st.title("Light attenuation")
    prop_reflect = st.slider("Surface reflection", 0.0, 1.0, float(DEFAULT_SETTINGS["prop_reflect"]), 0.01)
    K = st.number_input("K, water (1/m)", 0.0, 10.0, float(DEFAULT_SETTINGS["K"]), 0.01)
    self_shading = st.checkbox("Self-shading", value=DEFAULT_SETTINGS["self_shading"])
    Kp = st.number_input("Kp, plant (m²/g)", 0.0, 1.0, float(DEFAULT_SETTINGS["Kp"]), 0.001, format="%.4f")
    Bz = st.number_input("Biomass above leaves (g)", 0.0, 100.0, float(DEFAULT_SETTINGS["Bz"]))

    organs = st.multiselect("Organs", list(ORGAN_PARAMETERS.keys()), default=DEFAULT_SETTINGS["organs"])

# --- Main Content ---
st.header("🌿 Podostemum daily biomass budget")

if not organs:
    st.info("Select at least one organ in the sidebar.")
    st.stop()

try:
    budget_df, light_df = run_budget(
        lat, start_day, end_day, temperature, depth, tuple(organs), prop_reflect, K, Kp, Bz, self_shading
    )
except DomainError as e:
    st.error(f"Invalid input: {e}")
    logger.warning(f"Budget evaluation failed: {e}")
    st.stop()

col1, col2, col3, col4 = st.columns(4)
col1.metric("Mean day length (h)", f"{budget_df['Daylength (h)'].mean():.2f}")
col2.metric("Total gross (g)", f"{budget_df['Gross Assimilation (g/d)'].sum():.3f}")
col3.metric("Total respiration (g)", f"{budget_df['Respiration (g/d)'].sum():.3f}")
col4.metric("Total net (g)", f"{budget_df['Net Growth (g/d)'].sum():.3f}")

tab1, tab2, tab3 = st.tabs(["☀️ Light", "📈 Budget", "📋 Table"])

with tab1:
    st.subheader("Day length")
    st.plotly_chart(
        px.line(budget_df, x="Day", y="Daylength (h)", labels={"Day": "Julian day"}),
        use_container_width=True,
    )
    st.subheader("PAR at the three sampling times")
    st.plotly_chart(par_figure(light_df), use_container_width=True)

with tab2:
    st.subheader("Daily gross assimilation, respiration and net growth")
    budget_long = budget_df.melt(
        id_vars="Day",
        value_vars=["Gross Assimilation (g/d)", "Respiration (g/d)", "Net Growth (g/d)"],
        var_name="Term",
        value_name="g/d",
    )
    st.plotly_chart(px.line(budget_long, x="Day", y="g/d", color="Term"), use_container_width=True)

    st.subheader("Net growth by organ")
    organ_columns = [f"{organ}_net (g/d)" for organ in organs]
    st.plotly_chart(
        px.area(budget_df, x="Day", y=organ_columns, labels={"value": "g/d", "variable": "Organ"}),
        use_container_width=True,
    )
    cumulative = pd.DataFrame({"Day": budget_df["Day"], "Cumulative net (g)": budget_df["Net Growth (g/d)"].cumsum()})
    st.plotly_chart(px.line(cumulative, x="Day", y="Cumulative net (g)"), use_container_width=True)

with tab3:
    st.dataframe(budget_df, use_container_width=True)
    st.download_button(
        "Download CSV",
        budget_df.to_csv(index=False).encode("utf-8"),
        file_name=f"budget_lat{lat:g}.csv",
        mime="text/csv",
    )

st.markdown("---")
st.caption("Podostemum Biomass Budget Dashboard v0.1")
