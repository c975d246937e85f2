from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel
from BackEnd.core.clock import fmt_minutes
from FrontEnd.styles.design_tokens import COLORS

class FooterToday(QWidget):
    def __init__(self, today_text=""):
        super().__init__()
        layout = QHBoxLayout()
        layout.addStretch()
        self.label = QLabel(today_text)
        self.label.setObjectName("TodayLabel")
        layout.addWidget(self.label)
        self.setLayout(layout)
        self.setStyleSheet(f"background: {COLORS['footer_bg']}; border-radius: 16px; padding: 8px 24px; color: {COLORS['footer_text']}; font-size: 16px; font-weight: 500;")
    def set_today(self, text):
        self.label.setText(text)
    def set_stats(self, stats):
        if stats is None:
            self.set_today("")
            return
        self.set_today(
            f"Today: {fmt_minutes(stats.today_minutes)}   Streak: {stats.streak_days}d   "
            f"Days studied: {stats.days_studied}   Total: {stats.total_hours:.1f}h"
        )
