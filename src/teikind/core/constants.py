"""Downstream topics, view names and dedup key prefixes."""

# notify() topics
TOPIC_PROJECT_INFO = "ipfs.project_info"
TOPIC_PROJECT_ANNOUNCEMENT = "ipfs.project_announcement"

# refresh() views
VIEW_PROJECT_SUMMARY = "views.project_summary"

# watch() kind for script-controlled stake credentials
STAKE_KIND_SCRIPT = "Script"

# batch-local dedup key prefixes ("<prefix>:<project_id>")
KEY_PROJECT = "project"
KEY_PROJECT_DETAIL = "project-detail"
KEY_PROJECT_SCRIPT = "project-script"
