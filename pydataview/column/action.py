"""Action column: per-row buttons such as view, update and delete.

Usage:
    from pydataview.column import ActionButton, ActionColumn

    column = ActionColumn(
        template="{view} {delete}",
        url_creator=lambda action, context: f"/{action}/{context.key}",
        visible_buttons={"delete": lambda data, key, index: data["active"]},
        buttons={"view": ActionButton(content="View", title="Show details")},
    )
"""

from __future__ import annotations

import re

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import MissingUrlCreatorError
from ..html import add_css_class, tag
from ..url import ActionColumnUrlCreator
from ..values import resolve_value
from .base import Cell, Column, ColumnRenderer, DataContext, GlobalContext
from .header import HeaderContext


DEFAULT_TEMPLATE = "{view}\n{update}\n{delete}"

# {name} placeholders in button templates
_PLACEHOLDER = re.compile(r"\{([\w\-/]+)\}")


class ActionButton(BaseModel):
    """Declarative action button rendered as an ``<a>`` tag.

    Every field except ``override_attributes`` may be a callable receiving
    the row's :class:`DataContext`.

    Attributes
    ----------
    content : Any
        Link label; escaped unless it is trusted markup.
    url : str or Callable, optional
        Explicit URL. When None the column's URL creator is used.
    attributes : dict or Callable, optional
        Link attributes.
    css_class : str, list, None or False
        CSS class. False uses the renderer's default button class and None
        renders no class.
    title : str, optional
        Link title.
    override_attributes : bool
        When True the renderer's default button attributes are not applied.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    content: Any = ""
    url: str | Callable[..., str] | None = None
    attributes: dict[str, Any] | Callable[..., dict[str, Any]] | None = None
    css_class: str | list[str] | Callable[..., Any] | None | bool = False
    title: str | None = None
    override_attributes: bool = False


#: A button is either declarative or ``callable(url) -> html``.
ButtonSpec = ActionButton | Callable[[str], str]

#: Row visibility of a button: a flag or ``callable(data, key, index) -> bool``.
VisibleSpec = bool | Callable[[Any, Any, int], bool]


DEFAULT_BUTTONS: dict[str, ButtonSpec] = {
    "view": ActionButton(content="🔎", title="View", attributes={"name": "view", "role": "button"}),
    "update": ActionButton(content="✎", title="Update", attributes={"name": "update", "role": "button"}),
    "delete": ActionButton(content="❌", title="Delete", attributes={"name": "delete", "role": "button"}),
}


class ActionColumn(Column):
    """Column of per-row action buttons.

    Options left as None fall back to the :class:`ActionColumnRenderer`
    defaults.

    Attributes
    ----------
    template : str, optional
        Body template with ``{name}`` placeholders.
    before, after : str, optional
        Markup placed around the rendered template.
    url_config : Any
        Options for the URL creator, e.g. an ``ActionColumnUrlConfig``.
    url_creator : Callable, optional
        ``(action, context) -> url``.
    header, footer : str, optional
        Header defaults to the translated ``"Actions"``.
    content : Any
        Body content replacing the buttons; a literal or
        ``callable(context)``.
    buttons : dict, optional
        Buttons by name. The renderer defaults are used when None or empty.
    visible_buttons : dict, optional
        Visibility by name. Names not listed are visible.
    """

    template: str | None = None
    before: str | None = None
    after: str | None = None
    url_config: Any = None
    url_creator: Callable[..., str] | None = None
    header: str | None = None
    footer: str | None = None
    content: Any = None
    buttons: dict[str, ButtonSpec] | None = None
    visible_buttons: dict[str, VisibleSpec] | None = None
    column_attributes: dict[str, Any] = Field(default_factory=dict)
    header_attributes: dict[str, Any] = Field(default_factory=dict)
    body_attributes: dict[str, Any] = Field(default_factory=dict)
    footer_attributes: dict[str, Any] = Field(default_factory=dict)

    def get_renderer(self) -> type[ColumnRenderer]:
        return ActionColumnRenderer


class ActionColumnRenderer(ColumnRenderer):
    """Renderer for :class:`ActionColumn`.

    Parameters
    ----------
    url_creator : ActionColumnUrlCreator or Callable, optional
        Default ``(action, context) -> url`` for columns without their own.
    template : str
        Default body template.
    before, after : str
        Default markup around the template.
    buttons : Mapping, optional
        Default buttons. The built-in view, update and delete buttons when
        None.
    button_attributes : Mapping, optional
        Attributes applied to every :class:`ActionButton`.
    button_class : str, optional
        CSS class of buttons whose ``css_class`` is False.
    """

    column_class = ActionColumn

    def __init__(
        self,
        url_creator: ActionColumnUrlCreator | Callable[..., str] | None = None,
        template: str = DEFAULT_TEMPLATE,
        before: str = "",
        after: str = "",
        buttons: Mapping[str, Any] | None = None,
        button_attributes: Mapping[str, Any] | None = None,
        button_class: str | None = None,
    ) -> None:
        self.url_creator = url_creator
        self.template = template
        self.before = before
        self.after = after
        self.buttons = dict(DEFAULT_BUTTONS if buttons is None else buttons)
        self.button_attributes = dict(button_attributes or {})
        self.button_class = button_class

    def render_column(self, column: ActionColumn, cell: Cell, context: GlobalContext) -> Cell:
        self.check_column(column)
        return cell.add_attributes(column.column_attributes)

    def render_header(self, column: ActionColumn, cell: Cell, context: HeaderContext) -> Cell | None:
        self.check_column(column)
        header = column.header if column.header is not None else context.translate("Actions")
        return cell.with_content(header).add_attributes(column.header_attributes)

    def render_body(self, column: ActionColumn, cell: Cell, context: DataContext) -> Cell:
        self.check_column(column)
        if column.content is not None:
            content = str(resolve_value(column.content, context))
        else:
            buttons = column.buttons or self.buttons
            template = column.template if column.template is not None else self.template

            def replace(match: re.Match[str]) -> str:
                name = match.group(1)
                if name not in buttons or not self.is_button_visible(column, name, context):
                    return ""
                return self.render_button(column, name, buttons[name], context)

            content = _PLACEHOLDER.sub(replace, template).strip()
            before = column.before if column.before is not None else self.before
            after = column.after if column.after is not None else self.after
            content = before + content + after

        return cell.add_attributes(column.body_attributes).with_content(content).with_encode(False)

    def render_footer(self, column: ActionColumn, cell: Cell, context: GlobalContext) -> Cell:
        self.check_column(column)
        if column.footer is not None:
            cell = cell.with_content(column.footer)
        return cell.add_attributes(column.footer_attributes)

    def is_button_visible(self, column: ActionColumn, name: str, context: DataContext) -> bool:
        """Return True if the named button is shown for the row."""
        if not column.visible_buttons or name not in column.visible_buttons:
            return True
        visible = column.visible_buttons[name]
        if isinstance(visible, bool):
            return visible
        return bool(visible(context.data, context.key, context.index))

    def render_button(self, column: ActionColumn, name: str, button: Any, context: DataContext) -> str:
        """Render one button of a row."""
        if not isinstance(button, ActionButton):
            return str(button(self.create_url(column, name, context)))

        if button.url is None:
            url = self.create_url(column, name, context)
        else:
            url = str(resolve_value(button.url, context))

        attributes = dict(resolve_value(button.attributes, context) or {})
        if not button.override_attributes:
            attributes = {**self.button_attributes, **attributes}
        if button.title is not None:
            attributes["title"] = button.title

        css_class = self.button_class if button.css_class is False else resolve_value(button.css_class, context)
        if isinstance(css_class, str):
            attributes = add_css_class(attributes, css_class)
        elif isinstance(css_class, (list, tuple)):
            attributes = add_css_class(attributes, *css_class)

        attributes["href"] = url
        return tag("a", resolve_value(button.content, context), attributes)

    def create_url(self, column: ActionColumn, action: str, context: DataContext) -> str:
        """Return the URL of an action for a row.

        Raises
        ------
        MissingUrlCreatorError
            If neither the column nor the renderer has a URL creator.
        """
        url_creator = column.url_creator or self.url_creator
        if url_creator is None:
            raise MissingUrlCreatorError(action, column=type(column).__name__)
        return str(url_creator(action, context))
