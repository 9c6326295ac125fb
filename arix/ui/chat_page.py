"""NiceGUI chat page with PDF context upload."""

from nicegui import Client, events, ui

from arix.chat.session import ChatSession
from arix.models.schemas import Message, Role
from arix.session.store import SessionStore, StoreListener

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;800&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body {
        background: linear-gradient(135deg, #1f1c2c 0%, #928dab 50%, #1f1c2c 100%);
        min-height: 100vh;
    }

    .chat-title {
        background: linear-gradient(90deg, #facc15, #ec4899, #ef4444);
        -webkit-background-clip: text;
        background-clip: text;
        color: transparent;
    }

    .app-container {
        background: rgba(255, 255, 255, 0.2);
        backdrop-filter: blur(16px);
        border: 1px solid rgba(255, 255, 255, 0.1);
        border-radius: 24px;
        box-shadow: 0 8px 32px 0 rgba(31, 38, 135, 0.37);
        overflow: hidden;
    }

    .message-user {
        background: #6366f1;
        color: white;
        border-radius: 16px;
    }

    .message-model {
        background: rgba(255, 255, 255, 0.6);
        color: #1f2937;
        border-radius: 16px;
    }

    .message-enter { animation: rise 0.3s ease-out; }

    @keyframes rise {
        from { opacity: 0; transform: translateY(10px); }
        to { opacity: 1; transform: translateY(0); }
    }

    .input-bar {
        background: rgba(255, 255, 255, 0.3);
        backdrop-filter: blur(8px);
        border-radius: 12px;
    }
</style>
"""


def bind_to_client(session: ChatSession, client: Client, listener: StoreListener) -> None:
    """Subscribe a renderer for as long as the client exists.

    Disconnects are transient (the browser may reconnect), so the listener
    is only removed once the client is deleted.
    """
    unsubscribe = session.subscribe(listener)
    client.on_delete(unsubscribe)


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Each visit gets its own session."""
    ui.add_head_html(CUSTOM_CSS)
    session = ChatSession()

    scroll_area: ui.scroll_area
    messages_container: ui.column
    input_field: ui.input
    send_btn: ui.button
    document_label: ui.label
    upload: ui.upload

    def render_message(msg: Message) -> None:
        is_user = msg.role is Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-model"

        with ui.row().classes(f"w-full {align}"):
            with ui.element("div").classes(
                f"max-w-[75%] px-5 py-3 shadow-lg message-enter {bubble}"
            ):
                ui.label(msg.content).classes("text-sm whitespace-pre-wrap")

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start"):
            ui.label("Typing...").classes(
                "message-model px-4 py-2 text-sm text-gray-600 animate-pulse"
            )

    def refresh(store: SessionStore) -> None:
        """Re-render from store state. Never mutates the store."""
        messages_container.clear()
        with messages_container:
            for msg in store.transcript:
                render_message(msg)
            if store.pending:
                render_typing_indicator()

        send_btn.set_enabled(not store.pending)
        if store.document_name:
            document_label.set_text(f"📄 {store.document_name} uploaded")
        else:
            document_label.set_text("")
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        text = session.draft
        if not text.strip() or session.pending:
            return
        input_field.value = ""
        result = await session.submit(text)
        if result is not None:
            input_field.run_method("focus")

    async def handle_upload(e: events.UploadEventArguments) -> None:
        data = await e.file.read()
        name = e.file.name
        if not await session.attach_document(data, name):
            ui.notify(f"Could not read {name}", type="negative")
        upload.reset()

    # === UI Layout ===
    with ui.column().classes("w-full max-w-3xl mx-auto p-4 gap-4").style("height: 100vh"):
        ui.label("Arix (My Chatbot)").classes(
            "chat-title w-full text-5xl font-extrabold text-center"
        )

        with ui.column().classes("w-full flex-grow app-container"):
            scroll_area = ui.scroll_area().classes("w-full h-full")
            with scroll_area:
                messages_container = ui.column().classes("w-full gap-4 p-4")

        with ui.column().classes("w-full input-bar p-3 gap-2"):
            with ui.row().classes("w-full gap-3 items-center no-wrap"):
                input_field = (
                    ui.input(
                        placeholder="Type a message...",
                        on_change=lambda e: session.update_draft(e.value),
                    )
                    .props("dense outlined bg-color=white")
                    .classes("flex-grow")
                    .on("keydown.enter", send_message)
                )
                send_btn = (
                    ui.button(icon="send", on_click=send_message)
                    .props("round unelevated color=indigo")
                )
            with ui.row().classes("items-center gap-2"):
                upload = (
                    ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1)
                    .props("accept=application/pdf flat dense label='Upload PDF'")
                    .classes("max-w-xs")
                )
                document_label = ui.label().classes("text-white text-sm")

    bind_to_client(session, ui.context.client, refresh)
    refresh(session.store)


def main() -> None:
    ui.run(title="Arix", port=8080, reload=False)


if __name__ == "__main__":
    main()
