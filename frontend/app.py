import streamlit as st
import pandas as pd

from decor_allocator.config import (
    CAP, CATALOG_FILE, USER_DATA_FILE, TOWN_NAMES, STRATEGIES, DEFAULT_STRATEGY
)
from decor_allocator.io import DataLoader, ResultSaver
from decor_allocator.models import AllocationRequest
from decor_allocator.allocation import AllocationEngine
from decor_allocator.utils import sanitize_id, town_display_name

# ---- CONFIG ----
st.set_page_config(
    page_title="Home Quest Decoration Optimizer",
    page_icon="🏡",
    layout="wide",
    initial_sidebar_state="expanded"
)

# ---- CUSTOM CSS ----
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #2e7d32;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        font-size: 1.2rem;
        color: #666;
        margin-bottom: 2rem;
    }
</style>
""", unsafe_allow_html=True)


# ---- HELPER FUNCTIONS ----
@st.cache_resource
def get_catalog():
    """Load the decoration catalog once per session"""
    return DataLoader.load_catalog(CATALOG_FILE)


def quantity_key(name):
    return f"decoration-{sanitize_id(name)}"


def town_key(town):
    return f"town-{sanitize_id(town)}"


def restore_user_data(catalog):
    """Seed widget state from the last saved input"""
    if st.session_state.get('restored'):
        return
    st.session_state.restored = True
    st.session_state.setdefault(
        "strategy", DEFAULT_STRATEGY if DEFAULT_STRATEGY in STRATEGIES else STRATEGIES[0]
    )

    user_data = DataLoader.load_user_data(USER_DATA_FILE)
    if not user_data:
        return

    for town in TOWN_NAMES:
        st.session_state[town_key(town)] = town in user_data['towns']
    for name, quantity in user_data['quantities'].items():
        if name in catalog:
            st.session_state[quantity_key(name)] = int(quantity)
    st.session_state['valhalla-only'] = bool(user_data['valhalla_only'])
    if user_data['strategy'] in STRATEGIES:
        st.session_state['strategy'] = user_data['strategy']


def set_all_towns():
    for town in TOWN_NAMES:
        st.session_state[town_key(town)] = st.session_state['select-all-towns']


def reset_quantities():
    for decoration in get_catalog():
        st.session_state[quantity_key(decoration.name)] = 0


def results_frame(town_metrics):
    """One row per town with hearts per channel"""
    rows = []
    for town, data in town_metrics.items():
        rows.append({
            "Town": town_display_name(town),
            "💚 Green": data['green'],
            "💙 Blue": data['blue'],
            "💗 Red": data['red'],
            "Items": data['items'],
            "Balance spread": data['balance_spread'],
        })
    return pd.DataFrame(rows)


# ---- MAIN APP ----
catalog = get_catalog()
restore_user_data(catalog)

st.markdown('<div class="main-header">🏡 Home Quest Decoration Optimizer</div>', unsafe_allow_html=True)
st.markdown(f'<div class="sub-header">Spread your decorations across towns, up to {CAP} hearts per color</div>', unsafe_allow_html=True)

# ============ SIDEBAR ============
st.sidebar.title("📋 Towns & Options")

st.sidebar.checkbox("Select All/None", key="select-all-towns", on_change=set_all_towns)
for town, label in TOWN_NAMES.items():
    st.sidebar.checkbox(label, key=town_key(town))

st.sidebar.markdown("---")
valhalla_only = st.sidebar.checkbox(
    "Allow Valhalla items only in Evergarden",
    key="valhalla-only"
)
strategy = st.sidebar.radio(
    "Strategy",
    STRATEGIES,
    key="strategy",
    help="maximum fills one town at a time; balanced spreads each decoration across all towns"
)
st.sidebar.button("Reset All Values", on_click=reset_quantities)

# ============ DECORATION INPUTS ============
st.header("Enter Decoration Quantities")

categories = list(catalog.categories().items())
columns = st.columns(3)
for index, (category, decorations) in enumerate(categories):
    with columns[index % len(columns)]:
        st.subheader(category)
        for decoration in decorations:
            st.number_input(
                decoration.name,
                min_value=0,
                step=1,
                key=quantity_key(decoration.name),
                help=f"💚 {decoration.green}  💙 {decoration.blue}  💗 {decoration.red}"
            )

st.markdown("---")

if st.button("🎯 Optimize", type="primary", use_container_width=True):
    towns = [town for town in TOWN_NAMES if st.session_state.get(town_key(town))]
    quantities = {
        decoration.name: int(st.session_state.get(quantity_key(decoration.name), 0) or 0)
        for decoration in catalog
    }

    ResultSaver().save_user_data(towns, quantities, USER_DATA_FILE, valhalla_only, strategy)

    if not towns:
        st.warning("⚠️ Select at least one unlocked town")
        st.stop()

    request = AllocationRequest(towns, quantities, valhalla_only, strategy)
    engine = AllocationEngine(catalog)
    result = engine.allocate(request)
    output = engine.build_complete_output(request, result)
    metrics = output['metrics']

    # ---- SUMMARY ----
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Requested", metrics['total_requested'])
    with col2:
        st.metric("Placed", metrics['total_assigned'])
    with col3:
        st.metric("Unused", metrics['total_unused'])
    with col4:
        st.metric("Avg Utilization", f"{metrics['average_utilization']:.1%}")

    for warning in output['warnings']:
        st.warning(warning)

    st.dataframe(results_frame(metrics['towns']), hide_index=True, use_container_width=True)

    # ---- PER TOWN ----
    for town, data in metrics['towns'].items():
        if not data['items']:
            continue
        with st.expander(f"Results for {town_display_name(town)}", expanded=True):
            st.markdown(
                f"**Green:** {data['green']} 💚 &nbsp; "
                f"**Blue:** {data['blue']} 💙 &nbsp; "
                f"**Red:** {data['red']} 💗"
            )
            st.progress(min(max(data['green'], data['blue'], data['red']) / CAP, 1.0))
            for entry in data['decorations']:
                st.markdown(f"- {entry['quantity']}x {entry['name']}")

    # ---- UNUSED ----
    with st.expander("📦 Unused Decorations", expanded=False):
        if not output['unused']:
            st.success("✅ Every decoration found a town!")
        else:
            unused_df = pd.DataFrame(
                [{"Decoration": name, "Unused": count} for name, count in output['unused'].items()]
            )
            st.dataframe(unused_df, hide_index=True, use_container_width=True)

    if output['validation_issues']:
        with st.expander("⚠️ Validation Notes", expanded=False):
            for issue in output['validation_issues']:
                st.write(issue)

# ---- FOOTER ----
st.markdown("---")
