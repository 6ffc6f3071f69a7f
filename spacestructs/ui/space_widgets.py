"""Shared widgets: starfield background, glass panels, planet and topic cards."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Callable, Optional

from PySide6.QtCore import Qt, QPoint, QTimer
from PySide6.QtGui import (
    QColor,
    QLinearGradient,
    QPainter,
    QPen,
    QPixmap,
    QRadialGradient,
)
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QLabel,
    QLayout,
    QVBoxLayout,
    QWidget,
)

from spacestructs.core.planets import Planet
from spacestructs.ui.colors import SpaceColors, blend_hex, rgba
from spacestructs.ui.models import PlanetCardState, TopicState

logger = logging.getLogger(__name__)

_ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"
_warned_missing: set[str] = set()

# Fallback fill for planets without an image asset
_PLANET_COLORS = {
    "sun": "#FDB813",
    "mercury": "#A8A29E",
    "venus": "#E8C07D",
    "earth": "#3B82F6",
    "mars": "#D9534F",
    "jupiter": "#D8A373",
    "saturn": "#E9D8A6",
    "uranus": "#7DD3FC",
    "neptune": "#4F46E5",
}


def space_button_style(color: str, *, disabled: bool = False) -> str:
    """Outlined translucent button, grey when disabled."""
    accent = "#808080" if disabled else color
    fill = rgba(accent, 0.3)
    return f"""
        QPushButton {{
            background: {fill};
            color: {SpaceColors.TEXT_MUTED if disabled else SpaceColors.TEXT_PRIMARY};
            padding: 10px 20px;
            border: 1px solid {accent};
            border-radius: 10px;
            font-weight: 600;
            font-size: 14px;
        }}
        QPushButton:hover {{ background: {rgba(accent, 0.45)}; }}
        QPushButton:pressed {{ background: {rgba(accent, 0.6)}; }}
    """


def clear_layout(layout: QLayout) -> None:
    """Remove and delete every widget in *layout*."""
    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget is not None:
            widget.deleteLater()


def space_line_edit_style() -> str:
    return f"""
        QLineEdit {{
            background: rgba(255, 255, 255, 0.10);
            color: {SpaceColors.TEXT_PRIMARY};
            padding: 10px;
            border: 1px solid rgba(255, 255, 255, 0.30);
            border-radius: 10px;
            font-size: 14px;
        }}
    """


class SpaceBackground(QWidget):
    """Black-to-violet gradient with a slowly twinkling starfield."""

    def __init__(self, parent: Optional[QWidget] = None, *, star_count: int = 140, seed: int = 7) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        rng = random.Random(seed)
        # (x ratio, y ratio, radius, phase)
        self._stars = [
            (rng.random(), rng.random(), rng.choice((1, 1, 1, 2, 2, 3)), rng.random())
            for _ in range(star_count)
        ]
        self._tick = 0
        self._timer = QTimer(self)
        self._timer.setInterval(120)
        self._timer.timeout.connect(self._on_tick)
        self._timer.start()

    def _on_tick(self) -> None:
        self._tick = (self._tick + 1) % 1000
        self.update()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        gradient = QLinearGradient(0, 0, 0, self.height())
        gradient.setColorAt(0.0, QColor(SpaceColors.BG_TOP))
        gradient.setColorAt(0.6, QColor(SpaceColors.BG_MIDDLE))
        gradient.setColorAt(1.0, QColor(SpaceColors.BG_BOTTOM))
        painter.fillRect(self.rect(), gradient)

        painter.setPen(Qt.NoPen)
        nebula = QRadialGradient(self.width() * 0.8, self.height() * 0.2, 260)
        nebula.setColorAt(0, QColor(108, 75, 216, 60))
        nebula.setColorAt(1, QColor(108, 75, 216, 0))
        painter.setBrush(nebula)
        painter.drawEllipse(QPoint(int(self.width() * 0.8), int(self.height() * 0.2)), 260, 260)

        for x_ratio, y_ratio, radius, phase in self._stars:
            # brightness oscillates between roughly 40% and 100%
            wave = abs(((self._tick / 40.0 + phase) % 2.0) - 1.0)
            alpha = int(100 + 155 * wave)
            painter.setBrush(QColor(255, 255, 255, alpha))
            painter.drawEllipse(QPoint(int(self.width() * x_ratio), int(self.height() * y_ratio)), radius, radius)


class GlassCard(QFrame):
    """Translucent panel used to group content on the dark background."""

    def __init__(self, parent: Optional[QWidget] = None, *, accent: Optional[str] = None) -> None:
        super().__init__(parent)
        self.setObjectName("glassCard")
        border = rgba(accent, 0.6) if accent else SpaceColors.CARD_BORDER
        self.setStyleSheet(
            f"""
            QFrame#glassCard {{
                background: {SpaceColors.CARD_BG};
                border: 1px solid {border};
                border-radius: 15px;
            }}
            """
        )


def planet_image_path(planet: Planet) -> Optional[Path]:
    """Asset path for *planet*, or None (warned once per planet) when it is missing."""
    path = _ASSETS_DIR / "planets" / f"{planet.image}.png"
    if path.exists():
        return path
    if planet.id not in _warned_missing:
        _warned_missing.add(planet.id)
        logger.warning("No image for %s at %s, drawing a disc", planet.name, path)
    return None


def planet_pixmap(planet: Planet, size: int) -> QPixmap:
    """Planet image from assets, or a drawn disc when the asset is missing."""
    path = planet_image_path(planet)
    if path is not None:
        pixmap = QPixmap(str(path))
        if not pixmap.isNull():
            return pixmap.scaled(size, size, Qt.KeepAspectRatio, Qt.SmoothTransformation)
        logger.warning("Could not load planet image: %s", path)

    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.transparent)
    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing, True)
    base = _PLANET_COLORS.get(planet.id, "#9CA3AF")
    grad = QRadialGradient(size * 0.35, size * 0.35, size * 0.6)
    grad.setColorAt(0.0, QColor(blend_hex(base, "#FFFFFF", 0.45)))
    grad.setColorAt(1.0, QColor(blend_hex(base, "#000000", 0.35)))
    painter.setPen(Qt.NoPen)
    painter.setBrush(grad)
    margin = max(2, size // 12)
    painter.drawEllipse(margin, margin, size - 2 * margin, size - 2 * margin)
    painter.end()
    return pixmap


class PlanetCard(QFrame):
    """A tappable planet with an orange ring when selected and a verdict border after a check."""

    IMAGE_SIZE = 100

    def __init__(self, state: PlanetCardState, on_click: Callable[[], None], parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._on_click = on_click
        self.setObjectName("planetCard")
        self.setCursor(Qt.PointingHandCursor)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(6)

        image = QLabel()
        image.setAlignment(Qt.AlignCenter)
        image.setPixmap(planet_pixmap(state.planet, self.IMAGE_SIZE))
        image.setFixedSize(self.IMAGE_SIZE + 8, self.IMAGE_SIZE + 8)
        ring = SpaceColors.SELECTED if state.selected else "transparent"
        image.setStyleSheet(f"border: 3px solid {ring}; border-radius: {(self.IMAGE_SIZE + 8) // 2}px;")
        layout.addWidget(image, 0, Qt.AlignCenter)

        name = QLabel(state.planet.name)
        name.setAlignment(Qt.AlignCenter)
        name.setStyleSheet(f"color: {SpaceColors.TEXT_PRIMARY}; font-size: 16px; font-weight: 500; border: none;")
        layout.addWidget(name)

        if state.correct is None:
            border = "transparent"
        else:
            border = SpaceColors.CORRECT if state.correct else SpaceColors.INCORRECT
        self.setStyleSheet(
            f"""
            QFrame#planetCard {{
                background: rgba(0, 0, 0, 0.30);
                border: 2px solid {border};
                border-radius: 15px;
            }}
            """
        )

    def mousePressEvent(self, event) -> None:
        self._on_click()
        super().mousePressEvent(event)


class TopicCard(QFrame):
    """Home screen card for one data structure."""

    def __init__(self, state: TopicState, on_click: Callable[[], None], parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._on_click = on_click
        topic = state.topic
        self.setObjectName("topicCard")
        self.setCursor(Qt.PointingHandCursor)
        self.setMinimumSize(220, 200)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(18, 18, 18, 18)
        layout.setSpacing(8)

        icon = QLabel(topic.icon)
        icon.setAlignment(Qt.AlignCenter)
        icon.setStyleSheet("font-size: 48px; border: none; background: transparent;")
        layout.addWidget(icon)

        title = QLabel(topic.title + ("  ✓" if state.completed else ""))
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(
            f"color: {SpaceColors.TEXT_PRIMARY}; font-size: 20px; font-weight: 800; border: none; background: transparent;"
        )
        layout.addWidget(title)

        subtitle = QLabel(topic.subtitle)
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setStyleSheet(f"color: {SpaceColors.TEXT_MUTED}; font-size: 13px; border: none; background: transparent;")
        layout.addWidget(subtitle)

        width = 2 if state.is_selected else 1
        self.setStyleSheet(
            f"""
            QFrame#topicCard {{
                background: rgba(128, 128, 128, 0.20);
                border: {width}px solid {topic.color};
                border-radius: 20px;
            }}
            QFrame#topicCard:hover {{
                background: rgba(128, 128, 128, 0.30);
            }}
            """
        )
        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(26)
        shadow.setOffset(0, 10)
        shadow.setColor(QColor(topic.color))
        self.setGraphicsEffect(shadow)

    def mousePressEvent(self, event) -> None:
        self._on_click()
        super().mousePressEvent(event)


class ExplanationPanel(GlassCard):
    """'What is a ...?' panel with key features and optional applications."""

    def __init__(
        self,
        *,
        title: str,
        summary: str,
        features: tuple[str, ...],
        applications: tuple[str, ...] = (),
        accent: str = SpaceColors.PRIMARY,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(18, 18, 18, 18)
        layout.setSpacing(10)

        heading = QLabel(f"What is a {title}?")
        heading.setStyleSheet(f"color: {SpaceColors.TEXT_PRIMARY}; font-size: 24px; font-weight: 800; border: none;")
        layout.addWidget(heading)

        body = QLabel(summary)
        body.setWordWrap(True)
        body.setStyleSheet(f"color: {SpaceColors.TEXT_SECONDARY}; font-size: 14px; border: none;")
        layout.addWidget(body)

        for section, points in (("Key Features:", features), ("Practical Applications:", applications)):
            if not points:
                continue
            label = QLabel(section)
            label.setStyleSheet(
                f"color: {SpaceColors.TEXT_PRIMARY}; font-size: 16px; font-weight: 700; border: none; padding-top: 6px;"
            )
            layout.addWidget(label)
            for point in points:
                bullet = QLabel(f"<span style='color:{accent}'>●</span>&nbsp;&nbsp;{point}")
                bullet.setWordWrap(True)
                bullet.setStyleSheet(f"color: {SpaceColors.TEXT_SECONDARY}; font-size: 14px; border: none;")
                layout.addWidget(bullet)


class ArrowConnector(QWidget):
    """Thin arrow drawn between linked nodes."""

    def __init__(self, color: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._color = color
        self.setFixedSize(36, 24)

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        pen = QPen(QColor(self._color))
        pen.setWidth(3)
        pen.setCapStyle(Qt.RoundCap)
        painter.setPen(pen)
        y = self.height() // 2
        painter.drawLine(4, y, self.width() - 6, y)
        painter.drawLine(self.width() - 12, y - 6, self.width() - 6, y)
        painter.drawLine(self.width() - 12, y + 6, self.width() - 6, y)
