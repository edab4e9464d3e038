# kinarai/llm/prompts.py

"""
Prompt text sent to Gemini.

English instructions are always present. Thai queries get extra Thai
lines interleaved and bilingual field descriptions; nothing English is
removed for them.
"""

import json
import re
from typing import Iterable, Optional

RECOMMENDATION_COUNT = 15

THAI_SCRIPT = re.compile(r"[ก-๙]")
THAILAND_KEYWORDS = re.compile(r"thailand|thai|bangkok|phuket|chiang mai|pattaya", re.IGNORECASE)

JSON_ONLY = (
    "Only return the JSON array, nothing else. "
    "No explanations, no markdown formatting, just the raw JSON array."
)


def is_thai_text(text: str) -> bool:
    return bool(THAI_SCRIPT.search(text or ""))


def is_thai_location(location: str) -> bool:
    return is_thai_text(location) or bool(THAILAND_KEYWORDS.search(location or ""))


def _render(lines: Iterable[Optional[str]]) -> str:
    # None entries are the Thai slots of an English-only prompt
    return "\n".join(line for line in lines if line is not None) + "\n"


def _thai(flag: bool, text: str) -> str:
    return text if flag else ""


def _thai_line(flag: bool, text: str) -> Optional[str]:
    return text if flag else None


def build_restaurant_prompt(location: str) -> str:
    thai = is_thai_location(location)
    return _render([
        "You are a knowledgeable food and restaurant expert with extensive knowledge of global "
        "cuisines and dining establishments, with special expertise in Thai cuisine and "
        "restaurants in Thailand.",
        _thai_line(thai, "คุณเป็นผู้เชี่ยวชาญด้านอาหารและร้านอาหารในประเทศไทย ให้คำแนะนำร้านอาหารที่ดีที่สุดในแต่ละพื้นที่"),
        "",
        f"Generate a detailed list of exactly {RECOMMENDATION_COUNT} authentic restaurant "
        f"recommendations near {location}.",
        _thai_line(thai, "เน้นร้านอาหารที่มีอยู่จริงและมีชื่อเสียงในพื้นที่นี้ ให้ข้อมูลที่ถูกต้องและเป็นประโยชน์สำหรับคนท้องถิ่นและนักท่องเที่ยว"),
        f"IMPORTANT: Only include REAL restaurants that ACTUALLY EXIST in {location}. "
        "Do not make up fictional restaurants.",
        "Use your knowledge to recommend well-known, popular, and authentic restaurants that are "
        f"definitely located in {location}.",
        "Include a diverse mix of cuisines, price ranges, and dining experiences.",
        _thai_line(thai, "รวมร้านอาหารไทยท้องถิ่น ร้านอาหารที่มีชื่อเสียง และร้านที่คนท้องถิ่นนิยม"),
        "For each restaurant, provide authentic and accurate information including realistic "
        "addresses, ratings, and descriptions.",
        _thai_line(thai, "ให้ที่อยู่ที่ถูกต้อง คะแนนที่สมจริง และคำอธิบายที่มีประโยชน์เกี่ยวกับอาหารเด่นและบรรยากาศของร้าน"),
        "",
        "Format the response as a valid JSON array of restaurant objects with the following properties:",
        '- id: a unique string identifier (use format "rest-1", "rest-2", etc.)',
        "- name: the restaurant name"
        + _thai(thai, " in Thai with English translation if applicable"),
        "- cuisine: the specific type of cuisine"
        + _thai(thai, " in Thai and English")
        + ' (be precise, e.g., "อาหารไทยภาคเหนือ (Northern Thai)" instead of just "Thai")',
        f"- address: a realistic and detailed address in {location}"
        + _thai(thai, " using Thai address format with district and sub-district"),
        "- rating: a number between 1 and 5 (can include one decimal place for precision)",
        '- priceRange: a string like "$", "$$", "$$$", or "$$$$" indicating affordability',
        "- description: a detailed 2-3 sentence description"
        + _thai(thai, " in Thai and English")
        + " highlighting unique aspects, signature dishes, ambiance, or history",
        "- imageUrl: leave this empty or null as we'll use default images",
        "",
        "Ensure each restaurant has all required properties and the data is well-formatted as a "
        "valid JSON array.",
        JSON_ONLY,
    ])


def build_food_prompt(food_type: str) -> str:
    thai = is_thai_text(food_type)
    return _render([
        "You are a culinary expert with deep knowledge of global cuisines, cooking techniques, "
        "and food history, with special expertise in Thai cuisine.",
        _thai_line(thai, "คุณเป็นผู้เชี่ยวชาญด้านอาหารไทยและอาหารนานาชาติ ให้ข้อมูลที่ถูกต้องและละเอียดเกี่ยวกับอาหารแต่ละชนิด"),
        "",
        f"Generate a detailed list of exactly {RECOMMENDATION_COUNT} {food_type} food recommendations.",
        _thai_line(thai, "เน้นอาหารที่เป็นที่นิยมและมีความสำคัญทางวัฒนธรรม ให้ข้อมูลที่ถูกต้องและเป็นประโยชน์"),
        "Only include REAL dishes that actually exist. Do not invent fictional dishes.",
        "Include a diverse mix of dishes, from traditional classics to modern interpretations.",
        _thai_line(thai, "รวมทั้งอาหารดั้งเดิมและอาหารประยุกต์ร่วมสมัย แสดงให้เห็นความหลากหลายของอาหารประเภทนี้"),
        "For each food item, provide authentic and accurate information including cultural "
        "context and key ingredients.",
        _thai_line(thai, "ให้ข้อมูลที่ถูกต้องเกี่ยวกับประวัติความเป็นมา วิธีการทำ และวัตถุดิบสำคัญของอาหารแต่ละชนิด"),
        "",
        "Format the response as a valid JSON array of food objects with the following properties:",
        '- id: a unique string identifier (use format "food-1", "food-2", etc.)',
        "- name: the food name "
        + ("in Thai with English translation" if thai else "in both local language (if applicable) and English"),
        "- cuisine: the specific regional cuisine this food belongs to"
        + _thai(thai, " in Thai and English"),
        "- description: a detailed 2-3 sentence description"
        + _thai(thai, " in Thai and English")
        + " explaining what the dish is, its origin, how it's prepared, and what makes it special",
        "- ingredients: an array of 5-8 main ingredients used in the dish"
        + _thai(thai, " in Thai and English"),
        "- imageUrl: leave this empty or null as we'll use default images",
        "",
        "Ensure each food item has all required properties and the data is well-formatted as a "
        "valid JSON array.",
        JSON_ONLY,
    ])


def build_verification_prompt(candidates, location: str) -> str:
    """
    `candidates` are Restaurant models; only id, name and address are sent.
    """
    listing = [{"id": r.id, "name": r.name, "address": r.address} for r in candidates]
    return _render([
        "You are a local expert with extensive knowledge of restaurants and locations in "
        "Thailand and around the world.",
        "",
        f'I have a list of restaurants that are supposed to be in or near "{location}".',
        "Your task is to verify which of these restaurants actually exist in this location.",
        "",
        "For each restaurant, determine:",
        f"1. If it's a real restaurant that exists in {location}",
        "2. If the address is accurate for this location",
        "",
        "Here's the list of restaurants:",
        json.dumps(listing, ensure_ascii=False, indent=2),
        "",
        "Return a JSON array containing ONLY the IDs of restaurants that are verified to be real "
        f"and actually in {location}.",
        'Format your response as: ["rest-1", "rest-3", "rest-5"] (just the IDs in an array)',
        "",
        "Only return the JSON array, nothing else. No explanations, no markdown formatting, "
        "just the raw JSON array of verified restaurant IDs.",
    ])
