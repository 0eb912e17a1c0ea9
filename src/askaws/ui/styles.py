"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - conversation + side panel
   ============================================ */
Screen {
    layout: grid;
    grid-size: 2 2;
    grid-columns: 3fr 1fr;
    grid-rows: 1fr auto;
    background: $background;
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 100%;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

#empty-hint {
    width: 100%;
    height: auto;
    padding: 2 2;
    align-horizontal: center;

    & Static {
        width: 100%;
        color: $text-muted;
        text-align: center;
    }

    & #empty-title {
        color: $foreground;
        text-style: bold;
    }
}

#quick-asks {
    width: 100%;
    height: auto;
    margin-top: 1;
    align-horizontal: center;

    & PromptButton {
        margin: 0 1;
    }
}

#typing-indicator {
    height: auto;
    padding: 0 2;
    color: $secondary;
    text-style: italic;
}

/* ============================================
   Side Panel - status, prompts, trace log
   ============================================ */
#side-panel {
    height: 100%;
    padding: 0;
}

#status-panel {
    height: auto;
    background: $panel;
    border: round $border;
    border-title-color: $accent;
    border-title-style: bold;
    padding: 0 1;

    &.busy {
        border: round $warning;
    }

    &.ok {
        border: round $success 60%;
    }

    &.bad {
        border: round $error;
    }
}

#suggested-prompts {
    height: auto;
    background: $panel;
    border: round $border;
    border-title-color: $accent;
    border-title-style: bold;
    border-title-align: left;
    padding: 0 1;
    margin-top: 1;

    & PromptButton {
        width: 100%;
        height: 1;
        min-width: 0;
        border: none;
        margin: 0;
        background: $surface;
        color: $foreground;
        text-align: left;
        content-align: left middle;

        &:hover {
            background: $primary 30%;
        }

        &:disabled {
            color: $text-muted;
        }
    }
}

#debug-panel {
    height: 1fr;
    min-height: 6;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
    margin-top: 1;
}

/* ============================================
   Composer - input, error line, hint
   ============================================ */
#composer {
    column-span: 2;
    height: auto;
    padding: 0 1;
    background: $panel;
    border-top: solid $border;
}

ChatInputBar {
    height: 3;
}

#chat-input {
    width: 1fr;
    border: tall $border;
    background: $surface;

    &:focus {
        border: tall $primary;
    }
}

#send-btn {
    width: 12;
    margin: 0 0 0 1;
    background: $primary;
    color: $background;
    border: tall $primary;
    text-style: bold;

    &:hover {
        background: $primary-lighten-1;
    }

    &:disabled {
        background: $surface;
        color: $text-muted;
        border: tall $border;
    }
}

#error-line {
    height: auto;
    color: $error;
    text-style: bold;
    padding: 0 1;
}

#hint {
    height: 1;
    color: $text-muted;
    padding: 0 1;
}

/* ============================================
   Chat Messages
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 2;
}

.user-message {
    border-left: tall $primary;
    background: $primary 8%;

    & .message-header {
        color: $primary;
        text-style: bold;
    }
}

.assistant-message {
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }
}

.message-header {
    height: auto;
}

.message-content {
    height: auto;
    color: $foreground;
}

/* ============================================
   Header / Footer
   ============================================ */
Header {
    background: $panel;
    color: $foreground;
}

HeaderTitle {
    color: $primary;
    text-style: bold;
}

Footer {
    background: $panel;
}

Markdown {
    margin: 0;
    padding: 0;
}

MarkdownFence {
    background: $panel;
    margin: 1 0;
}
"""
