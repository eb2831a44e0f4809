"""
Prompt templates for each dispatcher action.

Each template is a pure function of a validated payload that returns the
request body for the generateContent endpoint. Prompts are written in
Brazilian Portuguese because the whole product targets the Brazilian retail
market.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List

from models.actions import (
    Action,
    AnalyzeFpsPayload,
    ExplainComponentPayload,
    GenerateBuildPayload,
    OptimizeBuildPayload,
)

JSON_MIME_TYPE = "application/json"

FPS_REFERENCE_GAMES = ("Fortnite", "Valorant", "Warzone", "CS:GO")

BUILD_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "analysis": {"type": "STRING"},
        "build": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "component": {"type": "STRING"},
                    "name": {"type": "STRING"},
                    "bestPrice": {"type": "NUMBER"},
                    "store": {"type": "STRING"},
                },
                "required": ["component", "name", "bestPrice", "store"],
            },
        },
    },
    "required": ["analysis", "build"],
}


def _user_contents(text: str) -> List[Dict[str, Any]]:
    """Wrap a prompt as a single user turn."""
    return [{"role": "user", "parts": [{"text": text}]}]


def _dump_build(build: List[Any]) -> str:
    """Serialize a build compactly, the way it is quoted back to the model."""
    return json.dumps(build, ensure_ascii=False, separators=(",", ":"))


def _join_games(games) -> str:
    return ", ".join(games[:-1]) + " e " + games[-1]


def generate_build(payload: GenerateBuildPayload) -> Dict[str, Any]:
    text = (
        "Aja como um robô de busca e especialista em hardware. Sua tarefa é "
        "simular uma busca em tempo real (junho de 2025) no Google Shopping Brasil "
        f'para montar um PC baseado no pedido do usuário: "{payload.prompt}". '
        "Para cada componente da build, você deve: "
        "1. Encontrar o melhor preço realista ('bestPrice') disponível hoje no "
        "varejo online brasileiro (Kabum!, Pichau, Terabyte, etc.). Ignore preços "
        "de importação ou valores claramente desatualizados. "
        "2. Informar a loja ('store') onde este preço foi encontrado. "
        "3. O nome do componente ('component') deve estar em português. "
        "4. Fornecer uma análise da build, justificando as escolhas baseadas no "
        "custo-benefício. A resposta DEVE ser um objeto JSON válido."
    )
    return {
        "contents": _user_contents(text),
        "generationConfig": {
            "responseMimeType": JSON_MIME_TYPE,
            "responseSchema": BUILD_RESPONSE_SCHEMA,
        },
    }


def analyze_fps(payload: AnalyzeFpsPayload) -> Dict[str, Any]:
    text = (
        f"Dada a build: {_dump_build(payload.build)}, estime o FPS médio em 1080p "
        f"(Alto) para: {_join_games(FPS_REFERENCE_GAMES)}. Forneça uma análise "
        'textual. Responda em JSON com "analysis" e "games" (array de '
        "{gameName, estimatedFps})."
    )
    return {
        "contents": _user_contents(text),
        "generationConfig": {"responseMimeType": JSON_MIME_TYPE},
    }


def optimize_build(payload: OptimizeBuildPayload) -> Dict[str, Any]:
    text = (
        f'Dada a build: {_dump_build(payload.build)}, e o pedido: "{payload.prompt}", '
        "sugira 1 ou 2 trocas para melhorar o custo-benefício. Explique a vantagem. "
        "Responda em texto simples."
    )
    return {"contents": _user_contents(text)}


def explain_component(payload: ExplainComponentPayload) -> Dict[str, Any]:
    text = (
        "Explique em português, de forma simples para um iniciante, o que é "
        f'um(a) "{payload.component}" e por que o modelo "{payload.name}" é uma '
        "escolha considerável."
    )
    return {"contents": _user_contents(text)}


TEMPLATES: Dict[Action, Callable[[Any], Dict[str, Any]]] = {
    Action.GENERATE_BUILD: generate_build,
    Action.ANALYZE_FPS: analyze_fps,
    Action.OPTIMIZE_BUILD: optimize_build,
    Action.EXPLAIN_COMPONENT: explain_component,
}
