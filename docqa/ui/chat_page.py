"""NiceGUI page: document panel on the left, question/answer chat on the right."""

import logging

from nicegui import app, events, ui

from docqa.chat import ChatSession, DocumentInput, DocumentNotReadyError
from docqa.models.schemas import ChatMessage, MessageRole
from docqa.parsing.pdf_parser import MAX_FILE_SIZE
from docqa.ui.theme import ThemePreference

logger = logging.getLogger(__name__)

UPLOAD_REJECTED_MESSAGE = (
    "File could not be uploaded. Files must be 10MB or smaller and added one at a time."
)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f3f4f6; }
    body.body--dark { background: #111827; }

    .panel { background: white; }
    .body--dark .panel { background: #1f2937; }

    .panel-header { border-bottom: 1px solid #e5e7eb; }
    .body--dark .panel-header { border-color: #374151; }

    .message-user {
        background: #6366f1;
        color: white;
        border-radius: 12px;
    }

    .message-assistant {
        background: white;
        color: #1f2937;
        border-radius: 12px;
        box-shadow: 0 1px 2px rgba(0, 0, 0, 0.06);
    }
    .body--dark .message-assistant { background: #1f2937; color: #e5e7eb; }

    .avatar-user { background: #e5e7eb; color: #4b5563; }
    .avatar-assistant { background: #e0e7ff; color: #4f46e5; }

    .source-item {
        background: #e0e7ff;
        color: #3730a3;
        border-radius: 6px;
    }
    .body--dark .source-item { background: rgba(49, 46, 129, 0.5); color: #c7d2fe; }

    .typing-dot {
        width: 6px; height: 6px;
        background: #6366f1;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-4px); }
    }

    .error-banner { background: #fef2f2; color: #dc2626; border-top: 1px solid #e5e7eb; }
    .body--dark .error-banner { background: rgba(127, 29, 29, 0.3); color: #fca5a5; }
</style>
"""


@ui.page("/")
async def chat_page() -> None:
    """Main document Q&A page."""
    ui.add_head_html(CUSTOM_CSS)

    theme = ThemePreference(app.storage.user)
    dark = ui.dark_mode(value=theme.is_dark)

    draft = DocumentInput()

    text_area: ui.textarea
    upload: ui.upload
    question_input: ui.input
    scroll_area: ui.scroll_area

    def render_avatar(is_user: bool) -> None:
        css = "avatar-user" if is_user else "avatar-assistant"
        icon = "person" if is_user else "auto_awesome"
        with ui.element("div").classes(
            f"w-8 h-8 shrink-0 rounded-full flex items-center justify-center {css}"
        ):
            ui.icon(icon).classes("text-lg")

    def render_sources(sources: list[str]) -> None:
        with ui.column().classes("w-full gap-2 mt-3 pt-3 border-t border-indigo-200"):
            with ui.row().classes("items-center gap-1"):
                ui.icon("format_quote").classes("text-sm text-indigo-500")
                ui.label("Sources").classes("text-xs font-semibold text-indigo-500")
            with ui.column().classes("w-full gap-2 max-h-40 overflow-auto"):
                for source in sources:
                    ui.label(f'"{source}"').classes("source-item text-xs p-2")

    def render_message(msg: ChatMessage) -> None:
        is_user = msg.role == MessageRole.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align} gap-3 items-start no-wrap"):
            if not is_user:
                render_avatar(False)
            with ui.element("div").classes(f"relative max-w-[85%] px-4 py-3 {bubble}"):
                if not is_user and msg.content:
                    ui.button(
                        icon="content_copy",
                        on_click=lambda text=msg.content: copy_to_clipboard(text),
                    ).props("flat round dense size=sm").classes("absolute top-1 right-1 opacity-60")
                ui.label(msg.content).classes("text-sm whitespace-pre-wrap leading-relaxed pr-6")
                if msg.sources:
                    render_sources(msg.sources)
            if is_user:
                render_avatar(True)

    def render_thinking() -> None:
        with ui.row().classes("w-full justify-start gap-3 items-start"):
            render_avatar(False)
            with ui.element("div").classes("message-assistant px-4 py-3"):
                with ui.row().classes("items-center gap-2"):
                    ui.label("Thinking").classes("text-sm text-gray-500 italic")
                    with ui.row().classes("gap-1"):
                        for _ in range(3):
                            ui.element("div").classes("typing-dot")

    @ui.refreshable
    def transcript() -> None:
        if not session.messages:
            with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                ui.icon("forum").classes("text-5xl text-gray-300")
                ui.label("Process a document to start asking questions").classes(
                    "text-lg text-gray-400"
                )
            return
        for msg in session.messages:
            render_message(msg)
        if session.is_loading:
            render_thinking()

    def on_session_change() -> None:
        transcript.refresh()
        scroll_area.scroll_to(percent=1.0)

    session = ChatSession(on_change=on_session_change)

    def copy_to_clipboard(text: str) -> None:
        ui.clipboard.write(text)
        ui.notify("Copied to clipboard", type="positive", timeout=2000)

    async def toggle_theme() -> None:
        system_dark = False
        if theme.is_dark is None:
            system_dark = await ui.run_javascript(
                "window.matchMedia('(prefers-color-scheme: dark)').matches"
            )
        dark.set_value(theme.toggle(system_dark=bool(system_dark)))

    async def handle_upload(e: events.UploadEventArguments) -> None:
        content = await e.file.read()
        await draft.load_file(e.file.name, content)
        text_area.value = draft.text
        if draft.file_error:
            ui.notify(draft.file_error, type="negative")
        upload.reset()

    def handle_rejected() -> None:
        # Quasar only rejects on size or file count; types are checked server-side
        draft.reject_upload(UPLOAD_REJECTED_MESSAGE)
        text_area.value = draft.text
        ui.notify(draft.file_error, type="negative")

    def handle_text_change(e: events.ValueChangeEventArguments) -> None:
        # Programmatic updates after an upload already match the draft
        if e.value != draft.text:
            draft.edit_text(e.value or "")

    def process_document() -> None:
        try:
            text = draft.submit()
        except DocumentNotReadyError:
            return
        session.set_document(text)
        question_input.props('placeholder="Ask a question about the document..."')

    async def send_message() -> None:
        question = question_input.value or ""
        if not question.strip() or not session.can_ask:
            return
        question_input.value = ""
        await session.ask(question)
        if session.error:
            ui.notify(session.error, type="negative")

    # === UI Layout ===
    with ui.row().classes("w-full min-h-screen no-wrap gap-0 items-stretch flex-col md:flex-row"):
        # Document panel
        with ui.column().classes("panel w-full md:w-1/3 gap-0 border-r border-gray-200"):
            with ui.row().classes("panel-header w-full px-4 py-3 items-center justify-between"):
                with ui.row().classes("items-center gap-3"):
                    ui.icon("menu_book").classes("text-2xl text-indigo-500")
                    ui.label("Document Context").classes("text-lg font-bold")
                ui.button(on_click=toggle_theme).bind_text_from(
                    dark, "value", lambda value: "Light" if value else "Dark"
                ).props("outline rounded dense no-caps size=sm")

            with ui.column().classes("w-full p-4 gap-3 flex-grow"):
                upload = (
                    ui.upload(
                        label="Click to upload or drag and drop (.txt, .md, .pdf)",
                        on_upload=handle_upload,
                        on_rejected=handle_rejected,
                        auto_upload=True,
                        max_files=1,
                        max_file_size=MAX_FILE_SIZE,
                    )
                    .props("flat bordered")
                    .classes("w-full")
                    .bind_enabled_from(draft, "is_processing", backward=lambda busy: not busy)
                )
                upload.on("added", draft.clear_error)

                with ui.row().classes("items-center gap-2").bind_visibility_from(
                    draft, "file_label", backward=bool
                ):
                    ui.icon("description").classes("text-gray-500")
                    ui.label().bind_text_from(draft, "file_label").classes("text-sm truncate")
                ui.label().bind_text_from(draft, "file_error").bind_visibility_from(
                    draft, "file_error", backward=bool
                ).classes("text-sm font-medium text-red-600")

                text_area = (
                    ui.textarea(
                        placeholder="...or paste text here. File content will appear here after upload.",
                        on_change=handle_text_change,
                    )
                    .props("outlined input-style='min-height: 16rem'")
                    .classes("w-full flex-grow")
                    .bind_enabled_from(draft, "is_processing", backward=lambda busy: not busy)
                )

                ui.button("Process Document", icon="description", on_click=process_document).classes(
                    "w-full"
                ).bind_enabled_from(draft, "can_submit")

        # Chat panel
        with ui.column().classes("w-full md:w-2/3 gap-0 h-screen"):
            with ui.row().classes("panel panel-header w-full px-4 py-3 items-center gap-3"):
                ui.icon("auto_awesome").classes("text-2xl text-indigo-500")
                ui.label("AI Learning Assistant").classes("text-lg font-bold")

            with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
                with ui.column().classes("w-full p-5 gap-4"):
                    transcript()

            ui.label().bind_text_from(session, "error").bind_visibility_from(
                session, "error", backward=bool
            ).classes("error-banner w-full p-4")

            with ui.row().classes("panel w-full p-4 gap-3 items-center no-wrap border-t"):
                question_input = (
                    ui.input(placeholder="Please process a document first")
                    .props("outlined rounded dense")
                    .classes("flex-grow")
                    .on("keydown.enter", send_message)
                    .bind_enabled_from(session, "can_ask")
                )
                ui.button(icon="send", on_click=send_message).props(
                    "round unelevated color=primary"
                ).bind_enabled_from(session, "can_ask")
