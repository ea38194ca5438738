"""Contextual hint (CFR) copy."""

# Tabs tray
INACTIVE_TABS_BODY = "Tabs you haven’t viewed for two weeks get moved here."
INACTIVE_TABS_ACTION = "Turn off in settings"

# Firefox homepage, jump back in
JUMP_BACK_IN_PERSONALIZED_HOME = (
    "Meet your personalized homepage. Recent tabs, bookmarks, and search results "
    "will appear here."
)
JUMP_BACK_IN_PERSONALIZED_HOME_OLD_COPY = (
    "Your personalized Firefox homepage now makes it easier to pick up where you "
    "left off. Find your recent tabs, bookmarks, and search results."
)
JUMP_BACK_IN_SYNCED_TAB = "Your tabs are syncing! Pick up where you left off on your other device."

# Toolbar
TOOLBAR_SEARCH_BAR_PLACEMENT_BUTTON = "Toolbar Settings"
TOOLBAR_SEARCH_BAR_TOP_PLACEMENT = "Move the toolbar to the top if that’s more your style."
TOOLBAR_SEARCH_BAR_BOTTOM_PLACEMENT = "Move the toolbar to the bottom if that’s more your style."
TOOLBAR_SEARCH_BAR_PLACEMENT_FOR_NEW_USERS = (
    "To make entering info easier, the toolbar is now at the bottom by default."
)
TOOLBAR_SEARCH_BAR_PLACEMENT_FOR_EXISTING_USERS = (
    "The toolbar is at the top. Move it to the bottom for easier one-handed browsing."
)
