import flet as ft

from reportdesk.config import DEFAULT_YEAR
from reportdesk.models import ReportType

ACCENT = "#2457EB"


def configure_window_and_theme(page: ft.Page):
    page.window.center()
    page.title = "REPORT DESK"
    page.vertical_alignment = ft.MainAxisAlignment.START
    page.horizontal_alignment = ft.CrossAxisAlignment.CENTER
    page.window.resizable = False
    page.adaptive = True
    page.window.width = 445
    page.window.height = 820
    page.window.title_bar_hidden = True
    page.window.frameless = False

    page.theme_mode = ft.ThemeMode.LIGHT
    page.theme = ft.Theme(color_scheme=ft.ColorScheme(primary=ACCENT))
    page.scroll = ft.ScrollMode.AUTO


def build_title_bar(
    *,
    t=lambda k: k,
    on_clear_history=None,
    on_copy=None,
    on_minimize=None,
    on_close=None,
) -> tuple[ft.Row, ft.PopupMenuButton, ft.IconButton, ft.IconButton, ft.WindowDragArea]:
    """Верхняя панель: меню ≡, зона перетаскивания окна, кнопки свернуть/закрыть."""
    menu_button = ft.PopupMenuButton(
        icon=ft.Icons.MENU,
        items=[
            ft.PopupMenuItem(text=t("Copy download link"), on_click=lambda e: on_copy and on_copy(e)),
            ft.PopupMenuItem(text=t("Clear history"), on_click=lambda e: on_clear_history and on_clear_history(e)),
        ],
    )
    minimize_button = ft.IconButton(ft.Icons.REMOVE, on_click=on_minimize)
    close_button = ft.IconButton(ft.Icons.CLOSE, on_click=on_close)

    drag_area = ft.WindowDragArea(ft.Container(height=50, width=1000), expand=True, maximizable=False)
    row = ft.Row(
        controls=[menu_button, drag_area, minimize_button, close_button],
        alignment=ft.MainAxisAlignment.END,
        vertical_alignment=ft.CrossAxisAlignment.START,
    )
    return row, menu_button, minimize_button, close_button, drag_area


def build_header() -> ft.Column:
    return ft.Column(
        controls=[
            ft.Icon(ft.Icons.DESCRIPTION, size=96, color=ACCENT),
            ft.Container(height=20, width=400),
            ft.Text("FINANCIAL REPORTS", size=26, weight=ft.FontWeight.BOLD),
            ft.Text("Generate a Word report for a client", color=ft.Colors.GREY_600),
        ],
        alignment=ft.MainAxisAlignment.START,
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        width=400,
        spacing=4,
    )


def build_type_chips() -> tuple[ft.Row, dict[str, ft.Chip]]:
    """По чипу на каждый ReportType; в chip.data лежит значение типа."""
    chips = {
        rt.value: ft.Chip(
            label=ft.Text(rt.value),
            data=rt.value,
            selected=False,
            selected_color=ft.Colors.BLUE_100,
        )
        for rt in ReportType
    }
    row = ft.Row(
        controls=list(chips.values()),
        alignment=ft.MainAxisAlignment.CENTER,
        spacing=8,
        width=350,
    )
    return row, chips


def build_year_stepper(year: int = DEFAULT_YEAR) -> tuple[ft.Row, ft.Text, ft.IconButton, ft.IconButton]:
    year_value = ft.Text(str(year), size=22, weight=ft.FontWeight.BOLD, width=80, text_align=ft.TextAlign.CENTER)
    year_down = ft.IconButton(ft.Icons.REMOVE_CIRCLE_OUTLINE, tooltip="Previous year", icon_color=ACCENT)
    year_up = ft.IconButton(ft.Icons.ADD_CIRCLE_OUTLINE, tooltip="Next year", icon_color=ACCENT)
    row = ft.Row(
        controls=[ft.Text("Reporting year", expand=True), year_down, year_value, year_up],
        alignment=ft.MainAxisAlignment.CENTER,
        vertical_alignment=ft.CrossAxisAlignment.CENTER,
        width=350,
    )
    return row, year_value, year_down, year_up


def build_inputs() -> tuple[ft.TextField, ft.TextField]:
    client_name_field = ft.TextField(
        label="Client name or ID",
        label_style=ft.TextStyle(color=ACCENT),
        height=50,
        width=350,
        suffix=ft.IconButton(icon=ft.Icons.CONTENT_PASTE),
        border_color=ACCENT,
    )
    download_field = ft.TextField(
        label="Download link",
        label_style=ft.TextStyle(color=ACCENT),
        read_only=True,
        height=50,
        width=350,
        border_color=ACCENT,
    )
    return client_name_field, download_field


def build_buttons() -> tuple[ft.Row, ft.ElevatedButton, ft.ElevatedButton, ft.ElevatedButton]:
    generate_button = ft.ElevatedButton(
        "GENERATE",
        color=ft.Colors.WHITE,
        bgcolor=ACCENT,
        height=40,
        width=140,
        style=ft.ButtonStyle(shape=ft.RoundedRectangleBorder(radius=8), text_style=ft.TextStyle(size=16)),
    )
    copy_button = ft.ElevatedButton(
        content=ft.Icon(ft.Icons.CONTENT_COPY),
        color=ACCENT,
        height=40,
        width=80,
        style=ft.ButtonStyle(shape=ft.RoundedRectangleBorder(radius=8)),
    )
    clear_button = ft.ElevatedButton(
        "CLEAR",
        color=ACCENT,
        height=40,
        width=100,
        style=ft.ButtonStyle(shape=ft.RoundedRectangleBorder(radius=8), text_style=ft.TextStyle(size=16)),
    )
    button_row = ft.Row(
        controls=[generate_button, ft.Row(controls=[clear_button, copy_button], spacing=10)],
        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        width=350,
    )
    return button_row, generate_button, clear_button, copy_button


def build_status() -> ft.Text:
    return ft.Text("", visible=False, width=350, text_align=ft.TextAlign.CENTER)


def build_footer() -> ft.Column:
    footer = ft.Text(
        "History is kept for this session only",
        color=ft.Colors.GREY_500,
        width=350,
        text_align=ft.TextAlign.CENTER,
    )
    return ft.Column(
        controls=[footer],
        alignment=ft.MainAxisAlignment.END,
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
    )


def compose_page(  # noqa: PLR0913
    title_bar,
    header_col,
    chips_row,
    year_row,
    client_name_field,
    download_field,
    button_row,
    status_text,
    history_box,
    footer_container,
) -> ft.Column:
    """Главное окно: сверху title bar, ниже форма, под формой история."""
    form = ft.Column(
        controls=[
            ft.Container(height=30, width=400),
            header_col,
            ft.Container(height=15, width=400),
            chips_row,
            year_row,
            client_name_field,
            button_row,
            status_text,
            download_field,
            history_box,
            footer_container,
        ],
        alignment=ft.MainAxisAlignment.START,
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        spacing=10,
    )
    return ft.Column(
        controls=[title_bar, form],
        alignment=ft.MainAxisAlignment.START,
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        spacing=0,
    )
