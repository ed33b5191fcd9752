"""
Prompt builder for classification requests.

Responsible for:
- Loading and rendering Jinja2 templates (system + user prompts)
- Embedding the category definitions and the expected JSON shape
- Constructing the complete LLMGenerationRequest
"""

from pathlib import Path
from typing import Optional

import structlog
from jinja2 import Environment, FileSystemLoader

from email_classifier.models.enums import CATEGORY_DEFINITIONS
from email_classifier.models.llm_models import ChatMessage, LLMGenerationRequest


logger = structlog.get_logger(__name__)


class PromptBuilder:
    """
    Build chat-completion requests from raw email text.
    """
    
    def __init__(
        self,
        templates_dir: Path,
        default_model: str = "gpt-4o",
        default_temperature: float = 0.1,
    ):
        """
        Initialize prompt builder.
        
        Args:
            templates_dir: Directory containing system_prompt.txt and user_prompt_template.txt
            default_model: Model name placed in every request
            default_temperature: Sampling temperature placed in every request
        """
        self.templates_dir = Path(templates_dir)
        self.default_model = default_model
        self.default_temperature = default_temperature
        
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False  # We're generating prompts, not HTML
        )
        
        try:
            self.system_template = self.jinja_env.get_template("system_prompt.txt")
            self.user_template = self.jinja_env.get_template("user_prompt_template.txt")
            logger.info("Loaded prompt templates", templates_dir=str(self.templates_dir))
        except Exception as e:
            logger.error("Failed to load prompt templates", error=str(e))
            raise
    
    def build_system_prompt(self) -> str:
        """System prompt is static (no variables)."""
        return self.system_template.render().strip()
    
    def build_user_prompt(self, email_content: str) -> str:
        """
        Render the user prompt: category definitions, output shape, then the email.
        """
        names = [category.value for category in CATEGORY_DEFINITIONS]
        category_names = ", ".join(names[:-1]) + f", or {names[-1]}"
        
        rendered = self.user_template.render(
            categories=[
                (category.value, definition)
                for category, definition in CATEGORY_DEFINITIONS.items()
            ],
            category_names=category_names,
            email_content=email_content,
        ).strip()
        
        logger.debug(
            "User prompt built",
            email_length=len(email_content),
            prompt_length=len(rendered),
        )
        return rendered
    
    def build_request(
        self,
        email_content: str,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> LLMGenerationRequest:
        """
        Build the complete LLMGenerationRequest in JSON object mode.
        
        Args:
            email_content: Raw email text
            model: Override default model
            temperature: Override default temperature
        """
        final_model = model or self.default_model
        final_temperature = temperature if temperature is not None else self.default_temperature
        
        return LLMGenerationRequest(
            messages=[
                ChatMessage(role="system", content=self.build_system_prompt()),
                ChatMessage(role="user", content=self.build_user_prompt(email_content)),
            ],
            model=final_model,
            temperature=final_temperature,
            response_format={"type": "json_object"},
        )
