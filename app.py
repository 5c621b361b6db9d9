from __future__ import annotations

import csv
import io
import time
from typing import Any, Dict, List

import streamlit as st

from resizer.buffer import PixelBuffer
from resizer.errors import ValidationError
from resizer.io_utils import decode_image, encode_png
from resizer.metrics import psnr
from resizer.options import DEFAULT_QUALITY, Algorithm, Fit
from resizer.resize import resize

st.set_page_config(page_title="Image Resizer", layout="wide")

st.title("🖼️ Image Resizer")
st.caption("Nearest / Bilinear / Bicubic / Lanczos resampling with cover, contain and fill sizing")


def load_upload(u) -> PixelBuffer:
    return decode_image(u.read())


def _optional(value: float) -> Any:
    # number_input uses 0 for "not set"
    return value if value > 0 else None


tabs = st.tabs(["Resize", "Compare algorithms"])


# ==========================
# Tab 1: Resize
# ==========================
with tabs[0]:
    st.subheader("Resize")

    left, right = st.columns([1, 2], gap="large")

    with left:
        up = st.file_uploader("Upload image", type=["png", "jpg", "jpeg"], key="resize")

        width = st.number_input("Width (0 = auto)", min_value=0, value=0, step=1, key="width")
        height = st.number_input("Height (0 = auto)", min_value=0, value=0, step=1, key="height")
        scale = st.number_input("Scale (0 = off)", min_value=0.0, value=0.0, step=0.1, key="scale")
        aspect = st.number_input("Aspect ratio w/h (0 = off)", min_value=0.0, value=0.0, step=0.1, key="aspect")
        fit = st.selectbox("Fit", [f.value for f in Fit], index=0, key="fit")
        algorithm = st.selectbox(
            "Algorithm", [a.value for a in Algorithm], index=list(Algorithm).index(Algorithm.LANCZOS), key="algo"
        )
        quality = st.slider("Quality (encoder only)", 0.0, 1.0, DEFAULT_QUALITY, 0.05, key="quality")

        st.caption("Tip: **cover** returns a covering size and does not crop to the box.")

    if up is not None:
        src = load_upload(up)
        options = {
            "width": _optional(int(width)),
            "height": _optional(int(height)),
            "scale": _optional(scale),
            "aspect_ratio": _optional(aspect),
            "fit": fit,
            "algorithm": algorithm,
            "quality": quality,
        }

        with right:
            try:
                t0 = time.perf_counter()
                result = resize(src, options)
                elapsed = time.perf_counter() - t0
            except ValidationError as e:
                for msg in e.messages:
                    st.error(msg)
            else:
                c1, c2 = st.columns(2)
                c1.markdown(f"**Original** {src.width}×{src.height}")
                c1.image(src.pixels)
                c2.markdown(f"**Resized ({algorithm})** {result.width}×{result.height}")
                c2.image(result.buffer.pixels)

                st.success(f"{src.width}×{src.height} → {result.width}×{result.height} in {elapsed:.3f}s")
                st.download_button(
                    "Download PNG",
                    data=encode_png(result.buffer),
                    file_name=f"resized_{result.width}x{result.height}.png",
                    mime="image/png",
                )


# ==========================
# Tab 2: Compare algorithms
# ==========================
with tabs[1]:
    st.subheader("Compare algorithms")
    st.caption("Resamples by a scale factor with every algorithm, then back, and measures round-trip PSNR.")

    left, right = st.columns([1, 2], gap="large")

    with left:
        cmp_up = st.file_uploader("Upload image", type=["png", "jpg", "jpeg"], key="compare")
        cmp_scale = st.slider("Scale", 0.1, 3.0, 0.5, 0.1, key="cmp_scale")

    def _table_to_csv_bytes(rows: List[Dict[str, Any]]) -> bytes:
        out = io.StringIO()
        w = csv.DictWriter(out, fieldnames=list(rows[0].keys()))
        w.writeheader()
        w.writerows(rows)
        return out.getvalue().encode("utf-8")

    if cmp_up is not None:
        src = load_upload(cmp_up)
        table: List[Dict[str, Any]] = []

        with right:
            cols = st.columns(len(Algorithm))
            for col, algo in zip(cols, Algorithm):
                t0 = time.perf_counter()
                scaled = resize(src, {"scale": cmp_scale, "algorithm": algo.value})
                elapsed = time.perf_counter() - t0
                back = resize(
                    scaled.buffer,
                    {"width": src.width, "height": src.height, "fit": "fill", "algorithm": algo.value},
                )

                p = psnr(src, back.buffer)
                table.append(
                    {"algorithm": algo.value, "width": scaled.width, "height": scaled.height,
                     "seconds": round(elapsed, 4), "psnr_round_trip": round(p, 2)}
                )

                col.markdown(f"**{algo.value}**")
                col.image(scaled.buffer.pixels)
                col.caption(f"{elapsed:.3f}s | PSNR={p:.2f} dB")

            st.dataframe(table, use_container_width=True)
            st.download_button(
                "Download CSV",
                data=_table_to_csv_bytes(table),
                file_name=f"resize_compare_{cmp_scale}x.csv",
                mime="text/csv",
            )
