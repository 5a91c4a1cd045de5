"""NiceGUI chat page observing a ConversationState."""

from nicegui import events, ui

from cardchat.chat.state import ConversationState
from cardchat.chat.upload import UploadController
from cardchat.client.transport import ChatTransport
from cardchat.errors import TransportError, UploadValidationError
from cardchat.models.schemas import Message, Sender, UploadedFile

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f0f0f0; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: #d6d6d6; }

    .message-user {
        background: #4a90e2;
        color: white;
        border-radius: 12px;
        box-shadow: 2px 2px 8px rgba(0, 0, 0, 0.1);
    }

    .message-server {
        background: #8e8e8e;
        color: white;
        border-radius: 12px;
        box-shadow: 2px 2px 8px rgba(0, 0, 0, 0.1);
    }

    .typing-dot {
        width: 8px; height: 8px;
        background: white;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .input-box {
        background: white;
        border: 1px solid #e5e7eb;
        border-radius: 8px;
    }

    .action-btn { background: #8e8e8e !important; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Each visit gets its own conversation."""
    ui.add_head_html(CUSTOM_CSS)
    state = ConversationState(ChatTransport())
    uploads = UploadController(state)

    messages_container: ui.column
    scroll_area: ui.scroll_area
    input_field: ui.textarea
    send_btn: ui.button
    upload_widget: ui.upload

    def render_message(msg: Message) -> None:
        is_user = msg.sender is Sender.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-server"

        with ui.row().classes(f"w-full {align}"):
            with ui.element("div").classes(f"max-w-[60%] px-4 py-3 {bubble}"):
                ui.label(msg.text).classes("text-sm whitespace-pre-wrap break-words")

    def render_loading_indicator() -> None:
        with ui.row().classes("w-full justify-start"):
            with ui.element("div").classes("message-server px-4 py-3"):
                with ui.row().classes("gap-1 items-center"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            if not state.messages and not state.is_loading:
                with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                    ui.icon("credit_card").classes("text-5xl text-gray-300")
                    ui.label("Ask for a card, or upload your spending CSV").classes(
                        "text-lg text-gray-400"
                    )
            for msg in state.messages:
                render_message(msg)
            if state.is_loading:
                render_loading_indicator()
        scroll_area.scroll_to(percent=1.0)

    rendered: tuple[int, bool] = (0, False)

    def on_state_change(_: ConversationState) -> None:
        nonlocal rendered
        if input_field.value != state.pending_input:
            input_field.value = state.pending_input
        input_field.set_enabled(not state.is_loading)
        send_btn.set_enabled(not state.is_loading)

        current = (len(state.messages), state.is_loading)
        if current != rendered:
            rendered = current
            refresh_messages()

    def on_input_change(e: events.ValueChangeEventArguments) -> None:
        state.pending_input = e.value or ""

    async def send_message() -> None:
        try:
            await state.send_message(state.pending_input)
        except TransportError:
            ui.notify("Error connecting to chatbot API.", type="negative")

    async def handle_upload(e: events.UploadEventArguments) -> None:
        upload = UploadedFile(
            filename=e.file.name,
            content_type=e.file.content_type,
            content=await e.file.read(),
        )
        try:
            uploads.handle_upload(upload)
        except UploadValidationError as err:
            ui.notify(str(err), type="warning")
        finally:
            upload_widget.reset()

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.row().classes("w-full header px-5 py-4 items-center justify-center"):
            ui.label("Credit Card Recommendation System").classes("text-xl font-bold")

        # Messages
        with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
            messages_container = ui.column().classes("w-full p-5 gap-4")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-end header"):
            upload_widget = (
                ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1)
                .props("accept=.csv flat")
                .classes("w-48")
            )
            with ui.element("div").classes("flex-grow input-box px-3 py-2"):
                input_field = (
                    ui.textarea(placeholder="Type a message...", on_change=on_input_change)
                    .props("autogrow borderless dense rows=1")
                    .classes("w-full")
                    .on("keydown.enter.prevent", send_message)
                )
            send_btn = (
                ui.button("Send", on_click=send_message)
                .props("unelevated text-color=white")
                .classes("action-btn")
            )

    state.subscribe(on_state_change)
    refresh_messages()
