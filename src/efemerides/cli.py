"""Interactive command-line interface for Efemérides."""

import uuid
from enum import Enum

from .api import EfemeridesClient
from .config import AppConfig, config_from_env
from .dates import format_display_date, parse_user_date
from .favorites import FavoritesStore
from .home import HomeController, HomeState
from .logging import configure_logger, get_logger
from .models import EventRecord
from .storage import PreferencesStore


BANNER = """
╔══════════════════════════════════════════╗
║           📅 Efemérides del Día          ║
╚══════════════════════════════════════════╝

Comandos:
  /home                  - Pantalla principal
  /favoritos, /favs      - Efemérides favoritas
  /fecha D/M/AAAA        - Cambiar la fecha seleccionada
  /actualizar, /refresh  - Volver a pedir la efeméride
  /like                  - Marcar o desmarcar como favorita
  /borrar N              - Eliminar el favorito número N
  /help                  - Mostrar esta ayuda
  /exit, /quit           - Salir
"""

RULE = "─" * 40
EMPTY_FAVORITES = "No tienes efemérides favoritas aún."
NOTHING_LOADED = "No se pudo cargar la efeméride."


class Screen(Enum):
    """Screens reachable from the navigation commands."""

    HOME = "home"
    FAVORITES = "favoritos"


def render_home(state: HomeState, is_favorite: bool) -> str:
    """Render the Home screen as text."""
    lines = [
        "\n" + RULE,
        f"Fecha seleccionada: {format_display_date(state.selected_date)}",
        RULE,
    ]

    if state.is_loading:
        lines.append("⏳ Cargando...")
    elif state.error_message is not None:
        lines.append(f"❌ {state.error_message}")
    elif state.shows_event:
        heart = "♥" if is_favorite else "♡"
        lines.append(f"{heart} {state.titulo}")
        lines.append(f"Fecha: {format_display_date(state.selected_date)}")
        lines.append("")
        lines.append(state.evento or "")
    else:
        lines.append(NOTHING_LOADED)

    return "\n".join(lines)


def render_favorites(records: list[EventRecord]) -> str:
    """Render favorites, already in display order, as a numbered list."""
    lines = ["\n" + RULE, "Efemérides Favoritas", RULE]

    if not records:
        lines.append(EMPTY_FAVORITES)
        return "\n".join(lines)

    for number, record in enumerate(records, start=1):
        lines.append(f"{number}. {record.titulo}  [{record.fecha}]")
        lines.append(f"   {record.evento}")

    return "\n".join(lines)


class CLI:
    """Interactive two-screen interface: Home and Favoritos."""

    def __init__(
        self,
        config: AppConfig | None = None,
        client: EfemeridesClient | None = None,
        favorites: FavoritesStore | None = None,
    ) -> None:
        self.config = config or config_from_env()
        self.logger = get_logger()

        if favorites is None:
            favorites = FavoritesStore(
                PreferencesStore(self.config.preferences_path), json_logger=self.logger
            )
        if client is None:
            client = EfemeridesClient(
                self.config.api_url,
                timeout=self.config.http_timeout,
                json_logger=self.logger,
            )

        self.favorites = favorites
        self.home = HomeController(client, favorites, json_logger=self.logger)
        self.screen = Screen.HOME
        self.session_id = self._new_session_id()
        self._started = False
        self._unsubscribe = self.favorites.subscribe(self._on_favorites_changed)

    def _new_session_id(self) -> str:
        """Generate a new session ID."""
        return f"cli-{uuid.uuid4().hex[:8]}"

    def _on_favorites_changed(self, items: list[EventRecord]) -> None:
        if self._started:
            print(f"✅ Favoritos guardados localmente ({len(items)}).")

    def render(self) -> str:
        """Render the current screen."""
        if self.screen == Screen.FAVORITES:
            return render_favorites(self.favorites.sorted_items())
        return render_home(self.home.state, self.home.is_favorite())

    async def _handle_command(self, command: str) -> bool:
        """Handle a command. Returns True if should continue, False to exit."""
        name, _, arg = command.strip().partition(" ")
        name = name.lower()
        arg = arg.strip()

        if name in ("/exit", "/quit", "exit", "quit"):
            print("\n👋 ¡Hasta luego!")
            return False

        if name == "/help":
            print(BANNER)
            return True

        if name == "/home":
            self.screen = Screen.HOME
        elif name in ("/favoritos", "/favs"):
            self.screen = Screen.FAVORITES
        elif name == "/fecha":
            if not arg:
                print("❌ Indica una fecha: /fecha D/M/AAAA")
                return True
            self.screen = Screen.HOME
            await self.home.select_date(parse_user_date(arg))
        elif name in ("/actualizar", "/refresh"):
            self.screen = Screen.HOME
            await self.home.refresh()
        elif name == "/like":
            if self.home.toggle_favorite() is None:
                print("❌ No hay ninguna efeméride para marcar.")
                return True
        elif name == "/borrar":
            if not arg.isdigit():
                print("❌ Indica el número del favorito: /borrar N")
                return True
            removed = self.favorites.remove_displayed(int(arg) - 1)
            print(f"🗑  Eliminado: {removed.titulo}")
            self.screen = Screen.FAVORITES
        else:
            print(f"❌ Comando desconocido: {name}. Usa /help.")
            return True

        print(self.render())
        return True

    async def _process_line(self, line: str) -> bool:
        """Run one input line, reporting user errors without stopping."""
        try:
            return await self._handle_command(line)
        except (ValueError, IndexError, OSError) as e:
            print(f"\n❌ {e}")
            self.logger.log("error", error=str(e), command=line)
            return True

    async def start(self) -> None:
        """Load favorites and fetch today's efeméride."""
        self.logger.set_session_id(self.session_id)
        self.logger.log("session_start", api_url=self.config.api_url)
        self.favorites.load()
        if len(self.favorites):
            print(f"✅ Favoritos cargados del almacenamiento local ({len(self.favorites)}).")
        self._started = True
        await self.home.fetch(self.home.state.selected_date)

    def close(self) -> None:
        """Detach from the favorites store and log the end of the session."""
        self._unsubscribe()
        self.logger.log("session_end")

    async def run(self) -> None:
        """Run the interactive CLI."""
        print(BANNER)
        await self.start()
        print(self.render())

        try:
            while True:
                try:
                    user_input = input("\nefemerides> ").strip()
                except (KeyboardInterrupt, EOFError):
                    print("\n👋 ¡Hasta luego!")
                    break

                if not user_input:
                    continue

                if not await self._process_line(user_input):
                    break
        finally:
            self.close()


async def run_cli() -> None:
    """Run the CLI with configuration from the environment."""
    config = config_from_env()
    configure_logger(config.log_dir)
    cli = CLI(config=config)
    await cli.run()
