"""Service for the app integration catalogue."""

import logging

from sqlalchemy.orm import Session

from admin_backend.api.schemas import (
    AppListResponse,
    AppListType,
    AppResponse,
    SortOrder,
)
from admin_backend.db.models import App
from admin_backend.errors import AppNotFoundError
from admin_backend.services.listing import PageParams, contains, paginate
from admin_backend.services.mappers import app_to_response
from admin_backend.services.request_context import RequestContext

logger = logging.getLogger(__name__)


class AppService:
    """List apps and toggle their connection state."""

    def __init__(self, db: Session, ctx: RequestContext | None = None) -> None:
        self.db = db
        self.ctx = ctx or RequestContext()

    def list_apps(
        self,
        params: PageParams,
        type: AppListType | None = None,
        filter: str | None = None,
        sort: SortOrder | None = None,
    ) -> AppListResponse:
        """List apps ordered by name.

        Args:
            params: Requested page.
            type: Connection filter; ``all`` or None keeps every app.
            filter: Case-insensitive substring of the app name.
            sort: Name order, ascending unless ``desc``.

        Returns:
            One page of apps with pagination metadata.
        """
        self.ctx.ensure_active()
        query = self.db.query(App)
        if type == AppListType.connected:
            query = query.filter(App.connected.is_(True))
        elif type == AppListType.not_connected:
            query = query.filter(App.connected.is_(False))
        if filter:
            query = query.filter(contains(App.name, filter))

        name_order = App.name.desc() if sort == SortOrder.desc else App.name.asc()
        page = paginate(query, params, (name_order, App.id), app_to_response)
        logger.debug("Listed %d of %d apps", len(page.data), page.meta.total)
        return AppListResponse(data=page.data, meta=page.meta)

    def connect_app(self, app_id: str) -> AppResponse:
        """Mark an app connected.

        Raises:
            AppNotFoundError: No app has this id.
        """
        return self._set_connected(app_id, True)

    def disconnect_app(self, app_id: str) -> AppResponse:
        """Mark an app disconnected.

        Raises:
            AppNotFoundError: No app has this id.
        """
        return self._set_connected(app_id, False)

    def _set_connected(self, app_id: str, connected: bool) -> AppResponse:
        self.ctx.ensure_active()
        app = self.db.query(App).filter(App.id == app_id).first()
        if app is None:
            raise AppNotFoundError(app_id)

        app.connected = connected
        self.db.commit()
        self.db.refresh(app)
        logger.info("%s app %s", "Connected" if connected else "Disconnected", app_id)
        return app_to_response(app)
