"""Fixed value sets used across the marketplace."""

ALL_CATEGORIES = "Все категории"

CATEGORIES = (
    "Запчасти",
    "Телефоны",
    "Аксессуары",
)

ALL_CITIES = "all"

CITIES = (
    "Ташкент",
    "Самарканд",
    "Бухара",
    "Наманган",
    "Андижан",
    "Нукус",
    "Фергана",
    "Карши",
    "Коканд",
    "Маргилан",
    "Чирчик",
    "Джизак",
)

DEFAULT_CITY = CITIES[0]

# Listing statuses
STATUS_ON_DISPLAY = "На витрине"
STATUS_OUT_OF_STOCK = "Нет в наличии"
STATUS_IN_WAREHOUSE = "На складе"

LISTING_STATUSES = (STATUS_ON_DISPLAY, STATUS_OUT_OF_STOCK, STATUS_IN_WAREHOUSE)

FIRST_ARTICLE_NUMBER = 10000

INCOME_CATEGORIES = (
    "Оплата заказа",
    "Оплата счета",
    "Оплата товара",
    "Предоплата заказа",
    "Прочие доходы",
)

EXPENSE_CATEGORIES = (
    "Возврат товара",
    "Возврат заказа",
    "Выплата ЗП",
    "Оплата аренды",
    "Оплата коммунальных услуг",
    "Оплата поставщику",
    "Прочие расходы",
)

# Workshop task statuses; ALL_TASKS is only a tab, never stored
ALL_TASKS = "Все задачи"
TASK_ACTIVE = "Активные"

TASK_STATUSES = (
    TASK_ACTIVE,
    "Срочные",
    "Готов",
    "Согласование",
    "Ждёт запчасть",
    "В работе",
)

TASK_TABS = (ALL_TASKS,) + TASK_STATUSES
