"""
Web front end.

One game per browser session: the session id lives in the ``gogar``
cookie and each session's game is stored in the database, so sessions
survive a server restart.
"""

import asyncio
import html
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Form, Request, Response
from fastapi.responses import HTMLResponse

from gogar.config import get_settings
from gogar.db import GameSessionRepository, create_engine, create_session_factory, init_db
from gogar.orchestrator.command_interpreter import STARTUP_BANNER, CommandInterpreter
from gogar.scorekeeping import Game, TranscriptEntry

logger = logging.getLogger(__name__)

COOKIE_NAME = "gogar"

WELCOME_BACK = """Welcome back!  You can start where you left off,
or start a new game by typing 'new game'
"""

PAGE_TEMPLATE = """<html>
  <head>
    <title>GOGAR</title>
  </head>
  <body>
    <form action="/" method="post">
      <p><label for="command">Command</label><br/>
      <input type="text" name="command" id="command" size="40" autofocus/></p>
    </form>
    <pre>{answer}</pre>
    <a href="/?transcript">Full transcript of session</a>
  </body>
</html>"""

TRANSCRIPT_TEMPLATE = """<html>
  <head>
    <title>GOGAR Transcript</title>
  </head>
  <body>
    <h2>Transcript</h2>
    <a href="/">Back to GOGAR</a>
    <pre>{entries}</pre>
  </body>
</html>"""


def render_page(answer: str) -> str:
    return PAGE_TEMPLATE.format(answer=html.escape(answer))


def render_transcript(transcript: list[TranscriptEntry]) -> str:
    entries = "".join(
        f"\n<b>{html.escape(e.input)}</b>\n\n{html.escape(e.output)}\n" for e in transcript
    )
    return TRANSCRIPT_TEMPLATE.format(entries=entries)


def create_app(database_url: str | None = None) -> FastAPI:
    """
    Build the web application.

    Args:
        database_url: Session database (uses config if not provided).

    Returns:
        The FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        engine = create_engine(database_url)
        await init_db(engine)
        app.state.session_factory = create_session_factory(engine)
        app.state.lock = asyncio.Lock()
        try:
            yield
        finally:
            await engine.dispose()

    app = FastAPI(
        title="GOGAR",
        description="The game of giving and asking for reasons",
        lifespan=lifespan,
        debug=get_settings().debug,
    )

    async def _session_game(
        request: Request,
        response: Response,
        repo: GameSessionRepository,
    ) -> tuple[int, Game, bool]:
        """Return (session id, game, is_new), creating a session when the cookie is missing or stale."""
        cookie = request.cookies.get(COOKIE_NAME)
        if cookie and cookie.isdigit():
            game = await repo.load_game(int(cookie))
            if game is not None:
                return int(cookie), game, False

        game = Game()
        game.new_game()
        model = await repo.create_from_game(game)
        response.set_cookie(COOKIE_NAME, str(model.id))
        logger.info(f"Started web session {model.id}")
        return model.id, game, True

    @app.get("/", response_class=HTMLResponse)
    async def show(request: Request, response: Response) -> str:
        """Show the command form, or the transcript with ?transcript."""
        async with app.state.session_factory() as db, db.begin():
            _, game, is_new = await _session_game(request, response, GameSessionRepository(db))

        if "transcript" in request.query_params:
            return render_transcript(game.transcript)
        return render_page(STARTUP_BANNER if is_new else WELCOME_BACK)

    @app.post("/", response_class=HTMLResponse)
    async def command(request: Request, response: Response, command: str = Form("")) -> str:
        """Run one command against the session's game."""
        async with app.state.lock:
            async with app.state.session_factory() as db, db.begin():
                repo = GameSessionRepository(db)
                session_id, game, _ = await _session_game(request, response, repo)
                answer = CommandInterpreter(game).execute(command)
                await repo.save_game(session_id, game)
        return render_page(answer)

    return app
