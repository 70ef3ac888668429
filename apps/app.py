# -*- coding: utf-8 -*-
import html
from typing import Optional, Tuple

import gradio as gr

from ecoroute.config import get_config
from ecoroute.container import get_container
from ecoroute.domain.errors import RenderingError
from ecoroute.domain.models import CURRENT_LOCATION_SENTINEL, GeoLocation, VehicleProfile
from ecoroute.observability import configure_logging
from ecoroute.ports.geolocation import GeolocationPort
from ecoroute.ports.rendering import AnswerRendererPort
from ecoroute.services import RoutePlannerService

# ============================ CONFIG ============================
CONFIG = get_config()
configure_logging(CONFIG.observability)

CONTAINER = get_container()
PLANNER: RoutePlannerService = CONTAINER.resolve(RoutePlannerService)
RENDERER: AnswerRendererPort = CONTAINER.resolve(AnswerRendererPort)

# Acquired once at startup; None means location access is not available.
USER_LOCATION: Optional[GeoLocation] = CONTAINER.resolve(GeolocationPort).current_location()

VEHICLE_CHOICES = [profile.short_label for profile in VehicleProfile]

READY_HTML = (
    "<h3>Ready to explore?</h3>"
    "<p>Enter your origin and destination to find the most efficient "
    "clean energy route.</p>"
)
LOADING_HTML = "<p><em>Analyzing Maps Data...</em></p>"


def _error_html(message: str) -> str:
    return f'<div class="route-error"><p>{html.escape(message)}</p></div>'


def use_current_location(current_origin: str) -> str:
    if USER_LOCATION is None:
        gr.Warning("Location access is not enabled.")
        return current_origin
    return CURRENT_LOCATION_SENTINEL


async def plan_route(origin: str, destination: str, vehicle: str) -> Tuple[str, str]:
    answer, error = await PLANNER.plan_safe(origin, destination, vehicle, USER_LOCATION)
    if answer is None:
        return _error_html(error or "Failed to generate eco-friendly route."), ""

    try:
        return RENDERER.render(answer)
    except RenderingError as e:
        return _error_html(e.user_message), ""


def _start_request() -> Tuple[dict, str, str]:
    return gr.update(interactive=False), LOADING_HTML, ""


def _end_request() -> dict:
    return gr.update(interactive=True)


# ============================ UI ============================
with gr.Blocks(title=CONFIG.ui.title) as app:
    gr.Markdown(
        f"""
# 🌿 {CONFIG.ui.title}
🔋 Clean Energy Optimized · 🧭 Google Maps Data
"""
    )

    with gr.Row():
        with gr.Column(scale=1):
            gr.Markdown("## 🧭 Plan Your Trip")
            with gr.Row():
                origin_tb = gr.Textbox(
                    label="Starting Point", placeholder="e.g. San Francisco, CA"
                )
                locate_btn = gr.Button("📍 Use current location", size="sm")
            destination_tb = gr.Textbox(
                label="Destination", placeholder="e.g. Los Angeles, CA"
            )
            vehicle_radio = gr.Radio(
                VEHICLE_CHOICES, value=CONFIG.ui.default_vehicle, label="Vehicle Type"
            )
            submit_btn = gr.Button("Find Eco Route", variant="primary")

            gr.Markdown(
                "ℹ️ **How it works:** Gemini grounded with Google Maps data finds "
                "energy-efficient routes, EV chargers and green stops."
            )

        with gr.Column(scale=2):
            answer_view = gr.HTML(value=READY_HTML)
            citations_view = gr.HTML(value="")

    locate_btn.click(use_current_location, inputs=origin_tb, outputs=origin_tb)

    submit_btn.click(
        _start_request,
        outputs=[submit_btn, answer_view, citations_view],
    ).then(
        plan_route,
        inputs=[origin_tb, destination_tb, vehicle_radio],
        outputs=[answer_view, citations_view],
    ).then(
        _end_request,
        outputs=submit_btn,
    )


if __name__ == "__main__":
    app.launch(server_name=CONFIG.ui.server_name, server_port=CONFIG.ui.server_port)
