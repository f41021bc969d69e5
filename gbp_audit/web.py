"""FastAPI web app for the GBP audit tool."""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from .audit import AuditSession, Failed, validate_link
from .errors import AuditError, ErrorKind
from .models import Report
from .render import render_page
from .scoring import score

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.SERVER: 502,
    ErrorKind.CONNECTIVITY: 503,
}


def create_app(session: AuditSession | None = None) -> FastAPI:
    """Build the app around a single audit session (one user, one page)."""
    app = FastAPI(title="GBP Audit Tool")
    app.state.session = session or AuditSession()

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        return render_page(request.app.state.session.state)

    @app.get("/audit", response_class=HTMLResponse)
    async def audit(request: Request, link: str = ""):
        session: AuditSession = request.app.state.session
        state = await session.submit(link)
        status_code = 200
        if isinstance(state, Failed):
            status_code = ERROR_STATUS[state.kind]
        return HTMLResponse(render_page(state), status_code=status_code)

    @app.get("/api/report")
    async def api_report(request: Request, url: str = ""):
        """Run one audit without touching the page session; JSON in, JSON out."""
        session: AuditSession = request.app.state.session
        try:
            link = validate_link(url, session.settings.link_fragment)
            metrics = await session.fetch(link)
        except AuditError as e:
            logger.info("API audit failed (%s): %s", e.kind.value, e)
            return JSONResponse(
                {"error": e.kind.value, "message": e.message},
                status_code=ERROR_STATUS[e.kind],
            )
        return Report(metrics=metrics, audit=score(metrics)).to_dict()

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    return app


app = create_app()


def serve():
    """Run the web app with uvicorn on GBP_AUDIT_HOST:GBP_AUDIT_PORT."""
    settings = app.state.session.settings
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    serve()
