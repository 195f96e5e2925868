"""Interface-level constants for the trackboard TUI."""

APP_LOGGER = "trackboard"

LANG_PACK = {
    "en": {
        "LOADING_DASHBOARD": "Loading roadmap...",
        "LOADING_ITERATION": "Loading iteration #{ident}...",
        "LOADING_TRACK": "Loading track {ident}...",
        "LOADING_TASK": "Loading task {ident}...",
        "LOADING_DOCUMENT": "Loading document {ident}...",
        "ERROR_TITLE": "Error",
        "ERROR_HINT": "Press r to retry or esc to go back",
        "ERR_DATA_FILE": "Cannot read data file {path}: {error}",
        "ERR_UNKNOWN_ROUTE": "Unknown screen: {kind}",
        "DASHBOARD_TITLE": "Roadmap",
        "VISION": "Vision",
        "SUCCESS_CRITERIA": "Success criteria",
        "EMPTY_DASHBOARD": "Nothing on the roadmap yet",
        "ITERATION_TITLE": "Iteration #{ident}: {name}",
        "TRACK_TITLE": "Track {ident}: {name}",
        "TASK_TITLE": "Task {ident}: {name}",
        "STATUS": "Status",
        "PROGRESS": "Progress: {completed}/{total} tasks ({percent}%)",
        "TAB_TASKS": "Tasks",
        "TAB_CRITERIA": "Acceptance Criteria",
        "TAB_DOCUMENTS": "Documents",
        "EMPTY_TASKS": "No tasks",
        "EMPTY_CRITERIA": "No acceptance criteria",
        "EMPTY_DOCUMENTS": "No documents",
        "MORE_ABOVE": "↑ More above",
        "MORE_BELOW": "↓ More below",
        "TESTING_INSTRUCTIONS": "Testing Instructions:",
        "NOTES": "Notes:",
        "FAILURE_REASON": "Failure Reason:",
        "ACTION_INPUT_TITLE": "Failure Reason",
        "ACTION_INPUT_HINT": "Press Enter to submit or ESC to cancel",
        "ACTION_INPUT_PLACEHOLDER": "Enter failure reason...",
        "DOCUMENT_TYPE": "Type",
        "DOCUMENT_TRACK": "Track",
        "DOCUMENT_ITERATION": "Iteration",
        "EMPTY_DOCUMENT": "(empty document)",
        "STATUS_ACTION_DONE": "{action}: {ident}",
        "HELP_UP": "move up",
        "HELP_DOWN": "move down",
        "HELP_PAGE_UP": "page up",
        "HELP_PAGE_DOWN": "page down",
        "HELP_JUMP_START": "jump to start",
        "HELP_JUMP_END": "jump to end",
        "HELP_TAB": "switch view",
        "HELP_ENTER": "select",
        "HELP_FAIL": "fail AC",
        "HELP_VERIFY": "verify AC",
        "HELP_SKIP": "skip AC",
        "HELP_BACK": "back",
        "HELP_QUIT": "quit",
        "HELP_TOGGLE": "help",
        "HELP_REFRESH": "refresh",
    },
    "ru": {
        "LOADING_DASHBOARD": "Загрузка роадмапа...",
        "LOADING_ITERATION": "Загрузка итерации #{ident}...",
        "LOADING_TRACK": "Загрузка трека {ident}...",
        "LOADING_TASK": "Загрузка задачи {ident}...",
        "LOADING_DOCUMENT": "Загрузка документа {ident}...",
        "ERROR_TITLE": "Ошибка",
        "ERROR_HINT": "r — повторить, esc — назад",
        "DASHBOARD_TITLE": "Роадмап",
        "VISION": "Видение",
        "TAB_TASKS": "Задачи",
        "TAB_CRITERIA": "Критерии приёмки",
        "TAB_DOCUMENTS": "Документы",
        "EMPTY_TASKS": "Нет задач",
        "EMPTY_CRITERIA": "Нет критериев приёмки",
        "MORE_ABOVE": "↑ Выше есть ещё",
        "MORE_BELOW": "↓ Ниже есть ещё",
        "ACTION_INPUT_TITLE": "Причина провала",
        "ACTION_INPUT_HINT": "Enter — отправить, ESC — отмена",
        "HELP_UP": "вверх",
        "HELP_DOWN": "вниз",
        "HELP_BACK": "назад",
        "HELP_QUIT": "выход",
    },
}
