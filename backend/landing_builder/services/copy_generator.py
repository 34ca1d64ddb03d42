# landing_builder/services/copy_generator.py
"""
Generation collaborator: asks Claude for landing page copy.

Returns the parsed payload ({"sections": [...], "meta": {...}}) or raises
GenerationFailure. Callers fall back to template defaults on failure.
"""
import logging
from typing import Any, Dict, Optional

import anthropic

from landing_builder.domain.errors import GenerationFailure
from landing_builder.domain.generation import parse_generated_copy
from landing_builder.domain.templates import get_template, resolve_template_name

logger = logging.getLogger(__name__)

SECTION_SHAPES = {
    "hero": '{"type": "hero", "headline": "Compelling headline (max 8 words)", "subheadline": "Value proposition in 1-2 sentences", "ctaText": "Action button text (2-3 words)", "ctaSubtext": "Reassurance text", "badge": "🚀 Launching Soon"}',
    "features": '{"type": "features", "headline": "Section title", "subheadline": "Section description", "items": [{"icon": "⚡", "title": "Feature Name", "description": "Short description"}]}',
    "howItWorks": '{"type": "howItWorks", "headline": "How It Works", "subheadline": "Get started in 3 easy steps", "steps": [{"number": "1", "title": "Step title", "description": "Step description"}]}',
    "testimonials": '{"type": "testimonials", "headline": "What People Say", "items": [{"quote": "Testimonial quote", "author": "Name", "role": "Role, Company"}]}',
    "faq": '{"type": "faq", "headline": "Frequently Asked Questions", "items": [{"question": "Question?", "answer": "Answer."}]}',
    "pricing": '{"type": "pricing", "headline": "Simple Pricing", "subheadline": "Choose your plan", "plans": [{"name": "Free", "price": "$0", "period": "/month", "features": ["Feature 1"], "cta": "Get Started", "highlighted": false}]}',
    "cta": '{"type": "cta", "headline": "Ready to Get Started?", "subheadline": "Join the waitlist today", "ctaText": "Join Waitlist"}',
    "countdown": '{"type": "countdown", "headline": "Launching Soon"}',
    "video": '{"type": "video", "headline": "See It In Action"}',
    "logos": '{"type": "logos", "headline": "Trusted By"}',
    "footer": '{"type": "footer", "copyright": "© <year> <project>. All rights reserved."}',
}


def build_prompt(
    project_name: str,
    project_pain: Optional[str],
    target_audience: Optional[str],
    template: str,
) -> str:
    section_types = get_template(template)["sections"]
    shapes = ",\n    ".join(SECTION_SHAPES[t] for t in section_types if t in SECTION_SHAPES)

    return f"""You are an expert landing page copywriter. Generate compelling, conversion-focused copy for a landing page.

PROJECT DETAILS:
- Name: {project_name}
- Pain/Problem: {project_pain or 'Not specified'}
- Target Audience: {target_audience or 'Not specified'}
- Template: {template}

Generate content for these sections: {', '.join(section_types)}

Return a JSON object shaped like:
{{
  "sections": [
    {shapes}
  ],
  "meta": {{"title": "{project_name} - Brief tagline", "description": "Meta description for SEO"}}
}}

GUIDELINES:
- Headlines should be benefit-focused, creating urgency or curiosity
- Features should address real pain points
- FAQ should answer common objections
- Keep everything concise and scannable

Return ONLY valid JSON, no markdown or other text."""


class CopyGenerator:
    def __init__(self, api_key: Optional[str], model: str, max_tokens: int = 4096, client=None):
        self.model = model
        self.max_tokens = max_tokens
        self._client = client
        self._api_key = api_key

    @classmethod
    def from_config(cls, config) -> "CopyGenerator":
        return cls(
            api_key=config.get("ANTHROPIC_API_KEY"),
            model=config.get("COPY_MODEL"),
            max_tokens=config.get("COPY_MAX_TOKENS", 4096),
        )

    @property
    def client(self):
        if self._client is None:
            if not self._api_key:
                raise GenerationFailure("Copy generation is not configured")
            self._client = anthropic.Anthropic(api_key=self._api_key)
        return self._client

    def generate_copy(
        self,
        project_name: str,
        project_pain: Optional[str],
        target_audience: Optional[str],
        template: str,
    ) -> Dict[str, Any]:
        template = resolve_template_name(template)
        prompt = build_prompt(project_name, project_pain, target_audience, template)

        try:
            message = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as exc:
            logger.warning("Copy generation request failed: %s", exc)
            raise GenerationFailure(str(exc)) from exc

        text = next(
            (block.text for block in message.content if getattr(block, "type", None) == "text"),
            None,
        )
        if text is None:
            raise GenerationFailure("No text content in response")

        return parse_generated_copy(text)
