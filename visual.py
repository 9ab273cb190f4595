# visual.py
# Streamlit dashboard for the FARS yearly files
#   streamlit run visual.py
# Uses the same loaders as run.py; nothing is written to disk.

import warnings

import plotly.express as px
import streamlit as st

from analysis import MONTHS, summarize_years
from errors import FarsError, InvalidYearWarning
from state_map import plot_state, render_state_geo

# ---------------- Config ----------------
st.set_page_config(page_title="FARS Crash Dashboard", page_icon="🚗", layout="wide")

ORANGE = "#F4A261"
TEMPLATE = "plotly_white"
MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

st.markdown("""
<style>
.kpi-card { background:#fff; border:1px solid #eee; border-radius:16px; padding:16px 18px; box-shadow:0 2px 12px rgba(0,0,0,.06); }
.kpi-label { font-size:.85rem; color:#666; margin-bottom:6px; }
.kpi-value { font-size:1.6rem; font-weight:700; margin-bottom:0; }
.kpi-sub { font-size:.8rem; color:#888; }
</style>
""", unsafe_allow_html=True)

# -------------- Inputs --------------
with st.sidebar:
    data_dir = st.text_input("Data folder (daccident_<year>.csv.bz2)", value="data")
    years_raw = st.text_input("Years (comma separated)", value="2013, 2014, 2015")
    state_raw = st.text_input("STATE code to map (optional)", value="")

years = [y.strip() for y in years_raw.split(",") if y.strip()]

st.title("🚗 FARS Fatal Crashes by Month")
st.caption("Counts of fatal crashes per month for each selected year. Empty cells = no crashes recorded.")

# -------------- Summary table --------------
with warnings.catch_warnings(record=True) as caught:
    warnings.simplefilter("always", InvalidYearWarning)
    try:
        table = summarize_years(years, data_dir=data_dir or None)
    except FarsError as e:
        st.error(str(e))
        st.stop()

for w in caught:
    if issubclass(w.category, InvalidYearWarning):
        st.warning(str(w.message))

total = int(table.sum().sum())
k1, k2 = st.columns(2)
with k1:
    st.markdown(f'<div class="kpi-card"><div class="kpi-label">Fatal crashes</div>'
                f'<div class="kpi-value">{total:,}</div><div class="kpi-sub">{len(table.columns)} year(s)</div></div>',
                unsafe_allow_html=True)
with k2:
    busiest = table.sum(axis=1).idxmax()
    st.markdown(f'<div class="kpi-card"><div class="kpi-label">Busiest month</div>'
                f'<div class="kpi-value">{MONTH_LABELS[busiest - 1]}</div><div class="kpi-sub">All selected years</div></div>',
                unsafe_allow_html=True)

st.markdown("---")
left, right = st.columns([2, 3])
with left:
    st.subheader("Month x Year")
    st.dataframe(table, use_container_width=True)
with right:
    st.subheader("Crashes over the Year")
    long = (table.rename(index=dict(zip(MONTHS, MONTH_LABELS)))
                 .reset_index()
                 .melt(id_vars="MONTH", var_name="year", value_name="crashes")
                 .dropna())
    long["year"] = long["year"].astype(str)
    fig = px.line(long, x="MONTH", y="crashes", color="year", markers=True, template=TEMPLATE,
                  category_orders={"MONTH": MONTH_LABELS},
                  labels={"MONTH": "Month", "crashes": "Fatal crashes", "year": "Year"})
    st.plotly_chart(fig, use_container_width=True)

# -------------- State map --------------
if state_raw.strip():
    st.markdown("---")
    map_year = st.selectbox("Year to map", [str(y) for y in table.columns])
    st.subheader(f"Crash locations: STATE {state_raw.strip()} in {map_year}")
    try:
        fig = plot_state(state_raw.strip(), map_year, data_dir=data_dir or None,
                         renderer=render_state_geo)
    except FarsError as e:
        st.error(str(e))
        st.stop()
    if fig is None:
        st.info("No crashes with a known position to plot.")
    else:
        st.plotly_chart(fig, use_container_width=True)
