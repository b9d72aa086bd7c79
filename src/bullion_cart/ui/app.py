"""
Streamlit UI for the bullion cart.
- Cart review (one tab per cart variant)
- Add a product
- Remove items by name prefix
- Checkout
"""

import io
import uuid

import streamlit as st

from bullion_cart.models.product import PhysicalProduct, FractionalProduct, ProductKind
from bullion_cart.models.cart import UnitsAggregate, GramsAggregate
from bullion_cart.core.cart_service import CartService, CURRENCY_SYMBOL
from bullion_cart.core.catalog import build_sample_products, build_carts

PAGE_TITLE = "Bullion Cart"

# -------------------------------------------------
# Page config
# -------------------------------------------------
st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon="🛒",
    layout="wide",
)

# -------------------------------------------------
# Session state
# -------------------------------------------------
if "session_id" not in st.session_state:
    st.session_state.session_id = str(uuid.uuid4())

if "carts" not in st.session_state:
    st.session_state.carts = build_carts(build_sample_products())

# -------------------------------------------------
# Header
# -------------------------------------------------
st.markdown(
    f"<h1 style='color:#1f77b4'>🛒 {PAGE_TITLE}</h1>",
    unsafe_allow_html=True
)
st.caption(f"Session ID: `{st.session_state.session_id}`")

tab_physical, tab_fractional, tab_settings = st.tabs(
    ["🧱 Bars (units)", "✨ Dust (grams)", "⚙️ Settings"]
)


def render_cart(kind: str):
    cart = st.session_state.carts[kind]

    st.subheader("🛒 Your Cart")
    items = cart.get_list()
    if items:
        st.dataframe([{"Item": i} for i in items], width="stretch", hide_index=True)
    else:
        st.info("Cart is empty.")

    if isinstance(cart, UnitsAggregate):
        st.write("Total units:", cart.get_total_units())
    elif isinstance(cart, GramsAggregate):
        st.write("Total grams:", cart.get_total_grams())

    st.markdown(f"### 💰 Total: {CURRENCY_SYMBOL}{cart.get_total()}")
    st.markdown("---")

    col1, col2 = st.columns(2)

    # ---------- ADD ----------
    with col1:
        with st.form(f"add_{kind}"):
            name = st.text_input("Product name", key=f"add_name_{kind}")
            price = st.number_input("Unit price", min_value=0.0, value=1.0, key=f"add_price_{kind}")
            if kind == ProductKind.PHYSICAL:
                qty = st.number_input("Units", min_value=0, value=1, step=1, key=f"add_qty_{kind}")
            else:
                qty = st.number_input("Weight (g)", min_value=0.0, value=1.0, key=f"add_qty_{kind}")

            if st.form_submit_button("➕ Add", key=f"add_submit_{kind}"):
                if not name.strip():
                    st.warning("Enter a product name.")
                    st.stop()
                if kind == ProductKind.PHYSICAL:
                    product = PhysicalProduct(name, price, int(qty))
                else:
                    product = FractionalProduct(name, price, qty)
                cart.add_item(product)
                st.rerun()

    # ---------- REMOVE ----------
    with col2:
        with st.form(f"remove_{kind}"):
            prefix = st.text_input("Remove items starting with", key=f"remove_prefix_{kind}")
            st.caption("Totals are not reduced by removals.")
            if st.form_submit_button("🗑️ Remove", key=f"remove_submit_{kind}"):
                if not prefix:
                    st.warning("Enter a name prefix.")
                    st.stop()
                cart.remove_item(prefix)
                st.rerun()

    # ---------- CHECKOUT ----------
    if st.button("✅ Checkout", key=f"checkout_{kind}"):
        buf = io.StringIO()
        receipt = CartService(cart).checkout(stream=buf)
        st.code(buf.getvalue())
        st.success(f"Checked out {receipt.item_count} item(s).")


with tab_physical:
    render_cart(ProductKind.PHYSICAL)

with tab_fractional:
    render_cart(ProductKind.FRACTIONAL)

# =================================================
# SETTINGS TAB
# =================================================
with tab_settings:
    st.subheader("Session")

    if st.button("🔄 Reset Carts"):
        st.session_state.session_id = str(uuid.uuid4())
        st.session_state.carts = build_carts(build_sample_products())
        st.success("Carts reset")
        st.rerun()
