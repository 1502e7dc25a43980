from __future__ import annotations

import os

from site_builder.api import create_app
from site_builder.firestore_project_store import FirestoreProjectStore
from site_builder.logging_config import setup_logging
from site_builder.project_store import ProjectStore

# Environment configuration
ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
PROJECT_ID = os.getenv("PROJECT_ID")
FIRESTORE_COLLECTION = os.getenv("FIRESTORE_COLLECTION", FirestoreProjectStore.COLLECTION_NAME)

# Setup logging
setup_logging(environment=ENVIRONMENT, project_id=PROJECT_ID)

# Use Firestore in production, in-memory for dev
if ENVIRONMENT == "dev":
    project_store = ProjectStore()
else:
    project_store = FirestoreProjectStore(project_id=PROJECT_ID, collection=FIRESTORE_COLLECTION)

app = create_app(store=project_store)
