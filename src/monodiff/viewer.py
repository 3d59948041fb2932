"""Comparison pipeline and interactive viewer session."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from . import preferences as prefs
from .diff import diff
from .models import DiffConfig, Granularity, PresentationModel, ViewMode, ViewOptions
from .navigation import NavigationIndex
from .normalize import coerce_text, normalize_script
from .presentation import build_presentation, expand_at
from .presentation import expand_all as expand_all_blocks
from .pretty import is_json, pretty_json


def compare(
    text_a: Any,
    text_b: Any,
    options: ViewOptions | None = None,
    config: DiffConfig | None = None,
) -> PresentationModel:
    """Run the full comparison pipeline on two inputs.

    Inputs that are not text are compared as empty documents. When both
    inputs are valid JSON they are pretty-printed first and the model is
    tagged with ``mode="json"``.
    """

    opts = options or ViewOptions()
    left = coerce_text(text_a)
    right = coerce_text(text_b)

    mode = "text"
    if is_json(left) and is_json(right):
        mode = "json"
        left = pretty_json(left)
        right = pretty_json(right)

    operations = normalize_script(diff(left, right, opts.granularity, config))
    return build_presentation(operations, opts, mode=mode)


@dataclass(frozen=True)
class ViewerState:
    """The current model together with its navigation index and cursor."""

    model: PresentationModel = field(default_factory=PresentationModel)
    navigation: NavigationIndex = field(default_factory=NavigationIndex)
    current: int = 0


class Viewer:
    """Stateful front end around :func:`compare`.

    Every comparison builds a fresh :class:`ViewerState` and swaps it in with a
    single assignment, so consumers never observe a model paired with the
    navigation index of another one.
    """

    def __init__(
        self,
        options: ViewOptions | None = None,
        *,
        config: DiffConfig | None = None,
        preferences: prefs.PreferenceStore | None = None,
        remember_inputs: bool = True,
    ) -> None:
        self.options = options or ViewOptions()
        self.config = config or DiffConfig()
        self.preferences: prefs.PreferenceStore = (
            preferences if preferences is not None else prefs.MemoryPreferences()
        )
        self.remember_inputs = remember_inputs
        self.text_a = ""
        self.text_b = ""
        self._state = ViewerState()

    @classmethod
    def from_preferences(cls, preferences: prefs.PreferenceStore, *, config: DiffConfig | None = None) -> Viewer:
        """Build a viewer whose options come from ``preferences``.

        Stored values that are missing or invalid fall back to the defaults.
        """

        defaults = ViewOptions()
        try:
            view = ViewMode(preferences.get(prefs.VIEW, defaults.view.value))
        except ValueError:
            view = defaults.view
        try:
            granularity = Granularity(preferences.get(prefs.TOKEN_GRANULARITY, defaults.granularity.value))
        except ValueError:
            granularity = defaults.granularity
        only_changes = preferences.get(prefs.ONLY_CHANGES, defaults.only_changes) is True
        options = ViewOptions(view=view, granularity=granularity, only_changes=only_changes)

        viewer = cls(options, config=config, preferences=preferences)
        viewer.text_a = coerce_text(preferences.get(prefs.INPUT_A, ""))
        viewer.text_b = coerce_text(preferences.get(prefs.INPUT_B, ""))
        return viewer

    @property
    def state(self) -> ViewerState:
        return self._state

    @property
    def model(self) -> PresentationModel:
        return self._state.model

    @property
    def navigation(self) -> NavigationIndex:
        return self._state.navigation

    @property
    def current(self) -> int:
        return self._state.current

    @property
    def counter_label(self) -> str:
        return self._state.navigation.label(self._state.current)

    @property
    def theme(self) -> str:
        return self.preferences.get(prefs.THEME, "dark")

    def set_theme(self, theme: str) -> None:
        # Styling belongs to the renderer; the viewer only remembers the choice.
        self.preferences.set(prefs.THEME, theme)

    def compare(self, text_a: Any = None, text_b: Any = None) -> PresentationModel:
        """Compare new inputs, or re-run the stored ones when both are omitted."""

        if text_a is not None or text_b is not None:
            self.text_a = coerce_text(text_a)
            self.text_b = coerce_text(text_b)
            if self.remember_inputs:
                self.preferences.set(prefs.INPUT_A, self.text_a)
                self.preferences.set(prefs.INPUT_B, self.text_b)
        return self.refresh()

    def refresh(self) -> PresentationModel:
        model = compare(self.text_a, self.text_b, self.options, self.config)
        self._state = ViewerState(model=model, navigation=NavigationIndex.from_model(model), current=0)
        return model

    def swap(self) -> PresentationModel:
        return self.compare(self.text_b, self.text_a)

    def configure(
        self,
        *,
        view: ViewMode | str | None = None,
        granularity: Granularity | str | None = None,
        only_changes: bool | None = None,
    ) -> ViewOptions:
        """Update and persist the given options without re-running the comparison."""

        if view is not None:
            self.options = replace(self.options, view=ViewMode(view))
            self.preferences.set(prefs.VIEW, self.options.view.value)
        if granularity is not None:
            self.options = replace(self.options, granularity=Granularity(granularity))
            self.preferences.set(prefs.TOKEN_GRANULARITY, self.options.granularity.value)
        if only_changes is not None:
            self.options = replace(self.options, only_changes=bool(only_changes))
            self.preferences.set(prefs.ONLY_CHANGES, self.options.only_changes)
        return self.options

    def set_view(self, view: ViewMode | str) -> PresentationModel:
        self.configure(view=view)
        return self.refresh()

    def set_granularity(self, granularity: Granularity | str) -> PresentationModel:
        self.configure(granularity=granularity)
        return self.refresh()

    def set_only_changes(self, only_changes: bool) -> PresentationModel:
        self.configure(only_changes=only_changes)
        return self.refresh()

    def next_change(self) -> int:
        return self._move(self._state.navigation.next(self._state.current))

    def prev_change(self) -> int:
        return self._move(self._state.navigation.prev(self._state.current))

    def expand(self, index: int) -> PresentationModel:
        """Expand the placeholder at block ``index`` in the current model."""

        state = self._state
        model = expand_at(state.model, index)
        self._state = replace(state, model=model)
        return model

    def expand_all(self) -> PresentationModel:
        state = self._state
        model = expand_all_blocks(state.model)
        self._state = replace(state, model=model)
        return model

    def _move(self, current: int) -> int:
        self._state = replace(self._state, current=current)
        return current
