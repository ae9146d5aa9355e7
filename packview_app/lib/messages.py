# packview_app/lib/messages.py
from __future__ import annotations
from typing import Dict

from packview_app.lib.log import get_logger

log = get_logger("messages")

FALLBACK_LOCALE = "pt-BR"

CATALOG: Dict[str, Dict[str, str]] = {
    "pt-BR": {
        # probe outcomes
        "config_ok": "Variáveis SUPABASE_URL e SUPABASE_ANON_KEY encontradas",
        "config_missing": "Variáveis SUPABASE_ não encontradas (reinicie o servidor!)",
        "config_error": "Erro ao ler a configuração: {error}",
        "auth_ok": "Conexão com Supabase Auth estabelecida",
        "auth_error": "Erro na conexão Auth: {error}",
        "db_ok": "Banco de dados acessível (tabela {table} OK)",
        "db_error": "Erro no banco: {error}",
        "storage_ok": "Storage configurado (bucket {bucket} encontrado)",
        "bucket_missing": "Bucket {bucket} não encontrado",
        "storage_error": "Erro ao verificar storage: {error}",
        # page
        "page_title": "Packview — Teste de conexão",
        "header_loading": "🔄 Testando conexão...",
        "header_all_ok": "✅ Packview configurado com sucesso!",
        "header_failed": "⚠️ Alguns testes falharam",
        "header_done": "🎯 Testes completos",
        "subtitle": "Verificando configuração do Supabase",
        "label_success": "SUCESSO",
        "label_error": "ERRO",
        "retry": "🔄 Testar Novamente",
        "congrats_title": "🎉 Parabéns!",
        "congrats_body": (
            "Seu ambiente está 100% configurado. Agora você pode começar a "
            "desenvolver os componentes do Packview!"
        ),
        "details": "Detalhes",
        "client_missing": "Faltam credenciais do Supabase (SUPABASE_URL / SUPABASE_ANON_KEY)",
    },
    "en": {
        "config_ok": "SUPABASE_URL and SUPABASE_ANON_KEY found",
        "config_missing": "SUPABASE_ variables not found (restart the server!)",
        "config_error": "Could not read the configuration: {error}",
        "auth_ok": "Connected to Supabase Auth",
        "auth_error": "Auth connection error: {error}",
        "db_ok": "Database reachable (table {table} OK)",
        "db_error": "Database error: {error}",
        "storage_ok": "Storage configured (bucket {bucket} found)",
        "bucket_missing": "Bucket {bucket} not found",
        "storage_error": "Storage check failed: {error}",
        "page_title": "Packview — Connection test",
        "header_loading": "🔄 Testing connection...",
        "header_all_ok": "✅ Packview is configured!",
        "header_failed": "⚠️ Some checks failed",
        "header_done": "🎯 Checks complete",
        "subtitle": "Checking the Supabase configuration",
        "label_success": "SUCCESS",
        "label_error": "ERROR",
        "retry": "🔄 Test again",
        "congrats_title": "🎉 Congratulations!",
        "congrats_body": (
            "Your environment is fully configured. You can start building "
            "the Packview components now!"
        ),
        "details": "Details",
        "client_missing": "Supabase credentials missing (SUPABASE_URL / SUPABASE_ANON_KEY)",
    },
}


def get_messages(locale: str | None = None) -> Dict[str, str]:
    """Return the text catalogue for ``locale``, falling back to pt-BR."""
    key = (locale or FALLBACK_LOCALE).strip()
    if key in CATALOG:
        return CATALOG[key]
    # "pt" -> "pt-BR", "en-US" -> "en"
    lang = key.split("-", 1)[0].lower()
    for name, texts in CATALOG.items():
        if name.split("-", 1)[0].lower() == lang:
            return texts
    log.warning("unknown locale %r, using %s", locale, FALLBACK_LOCALE)
    return CATALOG[FALLBACK_LOCALE]
