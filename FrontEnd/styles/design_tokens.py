# Design tokens for Study Tracker UI

COLORS = {
    'background': '#F7F9FC',
    'surface': '#E7F0FF',
    'primary': '#5EA1FF',
    'primary_hover': '#4C92F5',
    'text': '#3C4450',
    'text_strong': '#133A62',
    'border': '#DCE3ED',
    'button_secondary_bg': '#E7F0FF',
    'footer_bg': '#E7F0FF',
    'footer_text': '#133A62',
    'status_ok': '#2E7D32',
    'status_muted': '#7A8699',
}

FONTS = {
    'family': 'Inter, Manrope, Arial, sans-serif',
    'button_size': 14,
    'button_weight': 600,
    'text': 14,
    'text_strong': 18,
}

CHART = {
    'figure_bg': '#E2E8F0',
    'axes_bg': '#F7FAFC',
    'bar': '#8FAEC4',
    'bar_edge': '#7B9BB0',
    'text': '#1E3A56',
    'grid': '#C9D8E2',
}


def stylesheet():
    """Window-wide QSS built from the tokens above."""
    return f"""
    QMainWindow, QWidget {{
        background: {COLORS['background']};
        color: {COLORS['text']};
        font-family: {FONTS['family']};
        font-size: {FONTS['text']}px;
    }}
    QLineEdit, QComboBox, QDateEdit, QListWidget {{
        background: white;
        border: 1px solid {COLORS['border']};
        border-radius: 6px;
        padding: 4px 6px;
    }}
    QPushButton {{
        background: {COLORS['button_secondary_bg']};
        color: {COLORS['text_strong']};
        border: none;
        border-radius: 8px;
        padding: 6px 14px;
        font-size: {FONTS['button_size']}px;
        font-weight: {FONTS['button_weight']};
    }}
    QPushButton:hover {{
        background: {COLORS['primary_hover']};
        color: white;
    }}
    QLabel#UserStatus {{
        color: {COLORS['text_strong']};
        font-size: {FONTS['text_strong']}px;
    }}
    """
