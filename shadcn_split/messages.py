"""主控台訊息（en / es）."""

SEPARATOR = "--------------------------------------------------------"
DEMO_URL = "https://ui.shadcn.com/docs/components"

DEFAULT_LANG = "en"

MESSAGES = {
    "en": {
        "welcome": "--🚀 Welcome to the Shadcn UI component installer--",
        "demo": "\n🌐 You can check out a demo of the components here:",
        "running": "🚀 Running: {command}",
        "command_failed": "❌ Error executing command: {error}",
        "missing_file": "❌ Folder not found for generated file: {file}",
        "processing": "🔧 Processing file: {path}",
        "already_imported": '⚠️  Component "{name}" already imported. Skipping...',
        "generating": '🔧 Generating component "{name}"...',
        "created": '✅ Component "{name}" created at: {path}',
        "unknown_component": '⚠️  "{name}" is not in the component list, trying anyway...',
        "all_done": "🎉 All done! Components installed.",
        "enjoy": "🎨 You can now enjoy customizing the components.",
        "split_done": "✅ {created} created, {skipped} skipped, {missing} missing.",
        "no_components": "❌ No components given. Use NAME... or --all.",
        "watching": "👀 Watching for new components in '{path}'...",
        "stop_hint": "   Press Ctrl+C to stop.",
        "stopping": "\n👋 Stopping watch...",
        "new_file": "\n🔄 New file: {path}",
        "registry_failed": "⚠️  Could not fetch the registry ({error}), showing built-in list.",
    },
    "es": {
        "welcome": "--🚀 Bienvenido al instalador de componentes Shadcn UI--",
        "demo": "\n🌐 Puedes consultar una demo de los componentes aquí:",
        "running": "🚀 Ejecutando: {command}",
        "command_failed": "❌ Error al ejecutar el comando: {error}",
        "missing_file": "❌ No se encontró la carpeta generada para: {file}",
        "processing": "🔧 Procesando archivo: {path}",
        "already_imported": '⚠️  Componente "{name}" ya está importado. Saltando...',
        "generating": '🔧 Generando componente "{name}"...',
        "created": '✅ Componente "{name}" creado en: {path}',
        "unknown_component": '⚠️  "{name}" no está en la lista de componentes, se intentará igual...',
        "all_done": "🎉 ¡Listo! Componentes instalados.",
        "enjoy": "🎨 Ahora puedes disfrutar personalizando los componentes.",
        "split_done": "✅ {created} creados, {skipped} omitidos, {missing} no encontrados.",
        "no_components": "❌ No se indicaron componentes. Usa NOMBRE... o --all.",
        "watching": "👀 Esperando nuevos componentes en '{path}'...",
        "stop_hint": "   Pulsa Ctrl+C para detener.",
        "stopping": "\n👋 Deteniendo...",
        "new_file": "\n🔄 Nuevo archivo: {path}",
        "registry_failed": "⚠️  No se pudo consultar el registro ({error}), se muestra la lista incluida.",
    },
}

LANGUAGES = tuple(MESSAGES)


def message(key: str, lang: str = DEFAULT_LANG, **fields) -> str:
    """取出訊息並套入欄位；未知語言退回英文。"""
    table = MESSAGES.get(lang, MESSAGES[DEFAULT_LANG])
    return table[key].format(**fields)


def say(key: str, lang: str = DEFAULT_LANG, **fields) -> None:
    print(message(key, lang, **fields))


def banner(lang: str = DEFAULT_LANG) -> None:
    print(SEPARATOR)
    say("welcome", lang)
    print(SEPARATOR)
    say("demo", lang)
    print(f"🔗 {DEMO_URL}\n")
