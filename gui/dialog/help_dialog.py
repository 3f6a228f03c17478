from html import escape

from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
)


class HelpDialog(QDialog):
    """Usage steps and frequently asked questions."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle(self.tr("How to Use the Morse Code Translator"))
        self.setMinimumSize(520, 420)
        self.resize(680, 560)
        self._init_ui()

    def how_to_steps(self):
        return [
            (
                self.tr("Enter Your Text"),
                self.tr(
                    "Type or paste your text in the top box. The translator will "
                    "automatically convert it to Morse code."
                ),
            ),
            (
                self.tr("Switch Direction"),
                self.tr(
                    "Click the \"Text → Morse\" button between the two boxes to switch "
                    "to Morse-to-text translation, and click it again to switch back."
                ),
            ),
            (
                self.tr("Listen to Morse"),
                self.tr("Use the speaker button to hear your Morse code played as audio signals."),
            ),
        ]

    def faq_entries(self):
        return [
            (
                self.tr("What is Morse code?"),
                self.tr(
                    "Morse code is a method of encoding text characters using sequences of dots "
                    "and dashes, or short and long signals. It was developed by Samuel Morse and "
                    "Alfred Vail in the 1830s."
                ),
            ),
            (
                self.tr("How do I read Morse code?"),
                self.tr(
                    "In Morse code, each letter is represented by a unique combination of dots (.) "
                    "and dashes (-). A dot represents a short signal, while a dash represents a "
                    "long signal."
                ),
            ),
            (
                self.tr("Why is Morse code still relevant today?"),
                self.tr(
                    "While no longer the primary means of communication, Morse code remains "
                    "important in emergency situations, aviation, and amateur radio. It's also a "
                    "fascinating way to learn about the history of communication."
                ),
            ),
            (
                self.tr("Can I use this translator for learning Morse code?"),
                self.tr(
                    "Yes! This translator is an excellent tool for learning Morse code. Use the "
                    "audio feature to familiarize yourself with the sounds and practice both "
                    "encoding and decoding messages."
                ),
            ),
        ]

    def footer_text(self):
        return self.tr("Use this translator responsibly and have fun exploring the world of Morse code!")

    def build_html(self):
        steps = "".join(
            f"<li><b>{escape(title)}</b><br>{escape(body)}</li>"
            for title, body in self.how_to_steps()
        )
        faq = "".join(
            f"<p><b>{escape(question)}</b><br>{escape(answer)}</p>"
            for question, answer in self.faq_entries()
        )
        return (
            f"<h2>{escape(self.tr('How to Use the Morse Code Translator'))}</h2>"
            f"<ol>{steps}</ol>"
            f"<h2>{escape(self.tr('Frequently Asked Questions'))}</h2>"
            f"{faq}"
            f"<p align='center'><i>{escape(self.footer_text())}</i></p>"
        )

    def _init_ui(self):
        root = QVBoxLayout(self)
        root.setContentsMargins(16, 14, 16, 14)
        root.setSpacing(10)

        self.browser = QTextBrowser()
        self.browser.setStyleSheet("background: transparent; border: 1px solid rgba(0,0,0,0.12); border-radius: 8px;")
        self.browser.setHtml(self.build_html())
        root.addWidget(self.browser, 1)

        actions = QHBoxLayout()
        actions.addStretch(1)
        btn_close = QPushButton(self.tr("Close"))
        btn_close.clicked.connect(self.accept)
        btn_close.setDefault(True)
        actions.addWidget(btn_close)
        root.addLayout(actions)
