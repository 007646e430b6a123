import streamlit as st
import matplotlib.pyplot as plt
import warnings

from playground import (
    DegenerateFitWarning,
    PlaygroundError,
    Regime,
    RegularizationKind,
    evaluate_fit,
    fit_model,
    generate_training_set,
    sample_curve,
    true_function,
)
from playground.plotting import apply_theme, plot_playground, plot_residuals
from playground.settings import (
    COMPLEXITY,
    CURVE_STEPS,
    DEFAULT_KIND,
    DEFAULT_SEED,
    N_TRAINING_POINTS,
    NOISE,
    PLOT_DOMAIN,
    STRENGTH,
    ModelParameters,
)

# Suppress library deprecation chatter for cleaner output in Streamlit
warnings.filterwarnings("ignore", category=FutureWarning)

# --- Streamlit App Configuration ---
st.set_page_config(
    page_title="Model Generalization & Regularization",
    page_icon="📉",
    layout="wide",
    initial_sidebar_state="expanded"
)

apply_theme()

# --- Session State ---
if "data_seed" not in st.session_state:
    st.session_state.data_seed = DEFAULT_SEED


def regenerate_data():
    """Move to the next seed so the training points are redrawn."""
    st.session_state.data_seed += 1


# --- Cached Computations ---
@st.cache_data(show_spinner=False)
def load_training_set(num_points, noise_level, seed):
    return generate_training_set(num_points, noise_level, seed)


@st.cache_data(show_spinner=False)
def load_true_line(domain, steps):
    return sample_curve(true_function, domain, steps)


# --- Sidebar Controls ---
st.sidebar.markdown("# 📉 Regularization Playground")
st.sidebar.markdown("---")
st.sidebar.header("🎛️ Model Controls")

complexity = st.sidebar.slider(
    "🧩 Model Complexity",
    min_value=COMPLEXITY.min, max_value=COMPLEXITY.max,
    value=COMPLEXITY.default, step=COMPLEXITY.step,
    key="complexity",
    help="1 is a straight line; higher values let the model wiggle through the noise"
)
noise_level = st.sidebar.slider(
    "🔊 Data Noise",
    min_value=NOISE.min, max_value=NOISE.max,
    value=NOISE.default, step=NOISE.step,
    key="noise",
    help="Half-width of the uniform noise added to each training point"
)
reg_kind = st.sidebar.radio(
    "🛡️ Regularization Type",
    options=list(RegularizationKind),
    index=list(RegularizationKind).index(DEFAULT_KIND),
    format_func=lambda kind: kind.label,
    horizontal=True,
    key="reg_kind",
)
reg_strength = st.sidebar.slider(
    "⚖️ Regularization Strength (α)",
    min_value=STRENGTH.min, max_value=STRENGTH.max,
    value=STRENGTH.default, step=STRENGTH.step,
    key="reg_strength",
    disabled=reg_kind is RegularizationKind.NONE,
    help="How hard the penalty pulls the wiggles back toward the true curve"
)

st.sidebar.markdown("---")
st.sidebar.button("🔄 Regenerate Data", on_click=regenerate_data, key="regenerate")
st.sidebar.caption(f"Data seed: {st.session_state.data_seed}")

# --- Fit ---
try:
    params = ModelParameters.from_controls(complexity, reg_kind, reg_strength, noise_level)
    training_set = load_training_set(N_TRAINING_POINTS, params.noise_level, st.session_state.data_seed)
    true_line = load_true_line(PLOT_DOMAIN, CURVE_STEPS)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        fitted = fit_model(training_set, params.complexity, params.penalty, params.noise_level)
    model_line = sample_curve(fitted, PLOT_DOMAIN, CURVE_STEPS)
    report = evaluate_fit(fitted, training_set, PLOT_DOMAIN)
except PlaygroundError as exc:
    st.error(f"❌ Invalid settings: {exc}")
    st.stop()

for warning in caught:
    if not issubclass(warning.category, DegenerateFitWarning):
        continue
    st.warning(f"⚠️ {warning.message}")

# --- Main Layout ---
st.title("📉 Model Generalization & Regularization")
st.info("🎯 **Interactive ML Learning Tool** | An interactive guide to understanding how "
        "models learn, fail, and can be improved with regularization.")

col1, col2 = st.columns([2, 1])

with col1:
    fig_fit = plot_playground(training_set, true_line, model_line, title=fitted.name)
    st.pyplot(fig_fit)
    plt.close(fig_fit)

with col2:
    st.subheader("🧠 What's Happening?")

    if fitted.regime is Regime.UNDERFIT:
        st.warning("📏 **Underfitting** (high bias)")
    elif fitted.regime is Regime.OVERFIT:
        st.error("🌀 **Overfitting** (high variance)")
    elif fitted.regime is Regime.GOOD_FIT:
        st.success("🎯 **Good Fit**")
    else:
        st.info(f"🛡️ **Regularized** with {params.kind.label}")

    st.markdown(fitted.description)

    m1, m2 = st.columns(2)
    with m1:
        st.metric("📉 Training MSE", f"{report.training_error:.3f}")
        st.metric("🎯 Irreducible Error", f"{report.irreducible_error:.3f}")
    with m2:
        st.metric("🔍 MSE vs. Truth", f"{report.generalization_error:.3f}")
        st.metric("🌀 Max Deviation", f"{report.max_deviation:.3f}")

# --- Diagnostics ---
with st.expander("🔍 Residual Analysis & Model Diagnostics"):
    st.markdown("""
    **Residual analysis helps identify:**
    - **Missed structure**: curved patterns mean the model is too simple
    - **Memorized noise**: residuals near zero on training data but a large gap to the true curve
    - **Normality**: Q-Q plot should follow the diagonal line when only noise is left
    """)
    fig_residuals = plot_residuals(fitted, training_set, fitted.name)
    st.pyplot(fig_residuals)
    plt.close(fig_residuals)

# --- Learning Resources ---
with st.expander("📊 Core Theory: L1 vs. L2"):
    c1, c2 = st.columns(2)
    with c1:
        st.markdown("""
        **L1 (Lasso)**

        Penalizes the absolute size of coefficients. Small coefficients are
        pushed to exactly zero, so the model keeps only the features that
        matter. Here that shows up as wiggles that vanish entirely once the
        strength is large enough.
        """)
    with c2:
        st.markdown("""
        **L2 (Ridge)**

        Penalizes the squared size of coefficients. Every coefficient shrinks
        by the same proportion, so wiggles get smaller as strength grows but
        never disappear completely.
        """)

# Footer
st.markdown("---")
st.markdown("""
<div style='text-align: center; color: #666;'>
<small>Built to demonstrate core machine learning concepts.</small>
</div>
""", unsafe_allow_html=True)
