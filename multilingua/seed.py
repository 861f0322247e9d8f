"""
Demo catalog

Default subjects and sample articles loaded into an empty store on first
start. Everything goes through the regular store operations, so article
counts and validation behave exactly as for admin-created content.
"""

from __future__ import annotations

import logging
from datetime import datetime

from multilingua.storage.base import CatalogStore

logger = logging.getLogger(__name__)

_PHOTO = "https://images.unsplash.com/{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=500"
_AVATAR = "https://images.unsplash.com/{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=200&h=200"

DEFAULT_SUBJECTS = [
    {"name": "Technology", "slug": "technology", "icon": "ri-computer-line"},
    {"name": "Science", "slug": "science", "icon": "ri-flask-line"},
    {"name": "Environment", "slug": "environment", "icon": "ri-plant-line"},
    {"name": "Health", "slug": "health", "icon": "ri-heart-pulse-line"},
    {"name": "Arts & Culture", "slug": "arts-culture", "icon": "ri-palette-line"},
    {"name": "Travel", "slug": "travel", "icon": "ri-plane-line"},
]

# subject is referenced by slug and resolved to an id at load time
SAMPLE_ARTICLES = [
    {
        "subject": "technology",
        "slug": "rise-quantum-computing",
        "author": "Dr. Michael Chen",
        "author_image": _AVATAR.format("photo-1507003211169-0a1dd7228f2d"),
        "image_url": _PHOTO.format("photo-1635070041078-e363dbe005cb"),
        "read_time": 8,
        "publish_date": datetime(2023, 10, 15),
        "featured": True,
        "translations": {
            "en": {
                "title": "The Rise of Quantum Computing",
                "excerpt": "Explore the revolutionary potential of quantum computers and how they're reshaping our technological landscape.",
                "content": "Quantum computing represents a fundamental shift in how we process information...",
                "notes": [
                    "Quantum computers use qubits instead of classical bits",
                    "Can solve complex problems exponentially faster",
                    "Major tech companies investing heavily in quantum research",
                ],
                "resources": [
                    "Introduction to Quantum Computing",
                    "Latest Quantum Breakthroughs",
                    "Quantum Computing Applications",
                ],
            },
            "es": {
                "title": "El Auge de la Computación Cuántica",
                "excerpt": "Explora el potencial revolucionario de las computadoras cuánticas y cómo están remodelando nuestro panorama tecnológico.",
                "content": "La computación cuántica representa un cambio fundamental en cómo procesamos la información...",
                "notes": [
                    "Las computadoras cuánticas usan qubits en lugar de bits clásicos",
                    "Pueden resolver problemas complejos exponencialmente más rápido",
                    "Grandes empresas tecnológicas invierten en investigación cuántica",
                ],
                "resources": [
                    "Introducción a la Computación Cuántica",
                    "Últimos Avances Cuánticos",
                    "Aplicaciones de la Computación Cuántica",
                ],
            },
            "fr": {
                "title": "L'Essor de l'Informatique Quantique",
                "excerpt": "Découvrez le potentiel révolutionnaire des ordinateurs quantiques et comment ils transforment notre paysage technologique.",
                "content": "L'informatique quantique représente un changement fondamental dans notre façon de traiter l'information...",
                "notes": [
                    "Les ordinateurs quantiques utilisent des qubits au lieu de bits classiques",
                    "Peuvent résoudre des problèmes complexes exponentiellement plus rapidement",
                ],
                "resources": ["Introduction à l'Informatique Quantique"],
            },
            "ar": {
                "title": "صعود الحوسبة الكمية",
                "excerpt": "اكتشف الإمكانات الثورية للحواسيب الكمية وكيف تعيد تشكيل مشهدنا التكنولوجي.",
                "content": "تمثل الحوسبة الكمية تحولاً أساسياً في كيفية معالجتنا للمعلومات...",
                "notes": ["تستخدم الحواسيب الكمية الكيوبتات بدلاً من البتات التقليدية"],
                "resources": ["مقدمة في الحوسبة الكمية"],
            },
        },
        "available_languages": ["en", "es", "fr", "ar"],
    },
    {
        "subject": "science",
        "slug": "breaking-code-dna",
        "author": "Dr. Sarah Williams",
        "author_image": _AVATAR.format("photo-1573496359142-b8d87734a5a2"),
        "image_url": _PHOTO.format("photo-1507413245164-6160d8298b31"),
        "read_time": 7,
        "publish_date": datetime(2023, 10, 1),
        "featured": True,
        "translations": {
            "en": {
                "title": "Breaking the Code of DNA",
                "excerpt": "Recent advancements in genetic research are revolutionizing our understanding of life itself.",
                "content": "The discovery of DNA's structure was just the beginning...",
                "notes": [
                    "DNA sequencing becoming more accessible",
                    "CRISPR technology revolutionizing gene editing",
                    "Implications for personalized medicine",
                ],
                "resources": ["Understanding DNA Structure", "Future of Gene Therapy"],
            },
            "es": {
                "title": "Descifrando el Código del ADN",
                "excerpt": "Los recientes avances en la investigación genética están revolucionando nuestra comprensión de la vida misma.",
                "content": "El descubrimiento de la estructura del ADN fue solo el comienzo...",
            },
            "fr": {
                "title": "Décoder l'ADN",
                "excerpt": "Les récentes avancées en recherche génétique révolutionnent notre compréhension de la vie elle-même.",
                "content": "La découverte de la structure de l'ADN n'était que le début...",
            },
            "ar": {
                "title": "فك شفرة الحمض النووي",
                "excerpt": "التطورات الأخيرة في البحث الجيني تحدث ثورة في فهمنا للحياة نفسها.",
                "content": "كان اكتشاف بنية الحمض النووي مجرد البداية...",
            },
        },
        "available_languages": ["en", "es", "fr", "ar"],
    },
    {
        "subject": "science",
        "slug": "water-cycle-explained",
        "author": "Multilingua Science Team",
        "author_image": _AVATAR.format("photo-1573496359142-b8d87734a5a2"),
        "image_url": _PHOTO.format("photo-1502086223501-7ea6ecd79368"),
        "read_time": 6,
        "publish_date": datetime(2023, 12, 1),
        "featured": True,
        "translations": {
            "en": {
                "title": "The Water Cycle — A Clear and Simple Explanation",
                "excerpt": "Discover how water moves through nature in a never-ending cycle of evaporation, condensation, precipitation, and collection.",
                "content": "Water is essential to life, and it's constantly in motion in a process known as the water cycle...",
            },
            "fr": {
                "title": "Le Cycle de l'Eau — Explication Simple et Claire",
                "excerpt": "Découvrez comment l'eau circule dans la nature à travers un cycle infini d'évaporation, de condensation, de précipitation et de collecte.",
                "content": "L'eau est essentielle à la vie et se déplace constamment dans un processus appelé cycle de l'eau...",
            },
            "es": {
                "title": "El Ciclo del Agua — Explicación Clara y Sencilla",
                "excerpt": "Descubre cómo el agua se mueve por la naturaleza en un ciclo constante de evaporación, condensación, precipitación y recolección.",
                "content": "El agua es esencial para la vida y está en constante movimiento gracias al ciclo del agua...",
            },
            "ar": {
                "title": "دورة الماء - شرح مبسط وواضح",
                "excerpt": "اكتشف كيف تتحرك المياه في الطبيعة في دورة لا تنتهي من التبخر والتكاثف والهطول والتجميع.",
                "content": "الماء ضروري للحياة، وهو في حركة دائمة في عملية تعرف باسم دورة الماء...",
            },
        },
        "available_languages": ["en", "fr", "es", "ar"],
    },
    {
        "subject": "environment",
        "slug": "ocean-conservation-breakthroughs",
        "author": "Marina Costa",
        "author_image": _AVATAR.format("photo-1619967161441-78b613c7dd09"),
        "image_url": _PHOTO.format("photo-1583842761844-be1a5348c70a"),
        "read_time": 6,
        "publish_date": datetime(2023, 9, 28),
        "featured": False,
        "translations": {
            "en": {
                "title": "Ocean Conservation Breakthroughs",
                "excerpt": "Innovative solutions are emerging to protect our oceans and marine life from pollution and climate change.",
                "content": (
                    "# The Fight for Our Oceans\n\n"
                    "Our oceans face unprecedented challenges from pollution, climate change and overfishing.\n\n"
                    "# Technological Solutions\n\n"
                    "From plastic-eating bacteria to floating cleanup systems, technology is leading the charge."
                ),
                "notes": [
                    "New technologies for ocean cleanup",
                    "Marine ecosystem restoration projects",
                    "Community-led conservation efforts",
                ],
                "resources": ["Ocean Conservation Guide", "Sustainable Fishing Practices"],
            },
            "fr": {
                "title": "Avancées en Conservation des Océans",
                "excerpt": "Des solutions innovantes émergent pour protéger nos océans et la vie marine de la pollution et du changement climatique.",
                "content": (
                    "# La Lutte pour Nos Océans\n\n"
                    "Nos océans font face à des défis sans précédent dus à la pollution, au changement climatique et à la surpêche.\n\n"
                    "# Solutions Technologiques\n\n"
                    "Des bactéries mangeuses de plastique aux systèmes autonomes de nettoyage, la technologie mène la charge."
                ),
                "notes": ["Nouvelles technologies pour le nettoyage des océans"],
                "resources": ["Guide de Conservation des Océans"],
            },
        },
        "available_languages": ["en", "fr"],
    },
    {
        "subject": "health",
        "slug": "mindfulness-mental-health",
        "author": "Dr. Lisa Thompson",
        "author_image": _AVATAR.format("photo-1594824476967-48c8b964273f"),
        "image_url": _PHOTO.format("photo-1508672019048-805c876b67e2"),
        "read_time": 5,
        "publish_date": datetime(2023, 9, 15),
        "featured": False,
        "translations": {
            "en": {
                "title": "Mindfulness and Mental Health",
                "excerpt": "Research shows how mindfulness practices can significantly improve mental well-being and reduce stress.",
                "content": "Mindfulness meditation isn't just about relaxation...",
                "notes": [
                    "Regular practice reduces anxiety",
                    "Improves focus and concentration",
                    "Helps with emotional regulation",
                ],
                "resources": ["Getting Started with Mindfulness", "Daily Mindfulness Exercises"],
            },
        },
        "available_languages": ["en"],
    },
    {
        "subject": "technology",
        "slug": "future-of-artificial-intelligence",
        "author": "Alex Johnson",
        "author_image": _AVATAR.format("photo-1507003211169-0a1dd7228f2d"),
        "image_url": _PHOTO.format("photo-1534723328310-e82dad3ee43f"),
        "read_time": 5,
        "publish_date": datetime(2023, 5, 15),
        "featured": True,
        "translations": {
            "en": {
                "title": "The Future of Artificial Intelligence",
                "excerpt": "Explore how AI is transforming industries and our daily lives. From smart assistants to autonomous vehicles, the impact is revolutionary.",
                "content": "Artificial Intelligence (AI) is rapidly evolving and changing the way we interact with technology and each other...",
            },
            "es": {
                "title": "El Futuro de la Inteligencia Artificial",
                "excerpt": "Explora cómo la IA está transformando industrias y nuestra vida diaria.",
                "content": "La Inteligencia Artificial (IA) está evolucionando rápidamente y cambiando la forma en que interactuamos con la tecnología...",
            },
            "fr": {
                "title": "L'Avenir de l'Intelligence Artificielle",
                "excerpt": "Découvrez comment l'IA transforme les industries et notre vie quotidienne.",
                "content": "L'Intelligence Artificielle (IA) évolue rapidement et change la façon dont nous interagissons avec la technologie...",
            },
        },
        "available_languages": ["en", "es", "fr"],
    },
    {
        "subject": "travel",
        "slug": "hidden-gems-breathtaking-destinations",
        "author": "Maria González",
        "author_image": _AVATAR.format("photo-1494790108377-be9c29b29330"),
        "image_url": _PHOTO.format("photo-1506905925346-21bda4d32df4"),
        "read_time": 8,
        "publish_date": datetime(2023, 6, 3),
        "featured": True,
        "translations": {
            "en": {
                "title": "Hidden Gems: 10 Breathtaking Destinations",
                "excerpt": "Discover less-known but stunning places around the world that will take your breath away.",
                "content": "While popular destinations like Paris and Tokyo get all the attention, there are countless breathtaking places around the world...",
            },
            "fr": {
                "title": "Joyaux Cachés : 10 Destinations à Couper le Souffle",
                "excerpt": "Découvrez des endroits moins connus mais magnifiques à travers le monde.",
                "content": "Alors que des destinations populaires comme Paris et Tokyo attirent toute l'attention...",
            },
            "ar": {
                "title": "كنوز مخفية: 10 وجهات خلابة",
                "excerpt": "اكتشف أماكن أقل شهرة ولكنها مذهلة حول العالم.",
                "content": "بينما تحظى الوجهات الشهيرة مثل باريس وطوكيو بكل الاهتمام...",
            },
        },
        "available_languages": ["en", "fr", "ar"],
    },
    {
        "subject": "health",
        "slug": "nutrition-myths-debunked",
        "author": "Dr. Sarah Chen",
        "author_image": _AVATAR.format("photo-1573496359142-b8d87734a5a2"),
        "image_url": _PHOTO.format("photo-1512621776951-a57141f2eefd"),
        "read_time": 6,
        "publish_date": datetime(2023, 4, 29),
        "featured": True,
        "translations": {
            "en": {
                "title": "Nutrition Myths Debunked by Science",
                "excerpt": "Separate fact from fiction in the world of nutrition.",
                "content": "In the age of social media and quick-fix diets, nutrition misinformation spreads rapidly...",
            },
            "es": {
                "title": "Mitos Nutricionales Desmentidos por la Ciencia",
                "excerpt": "Separa los hechos de la ficción en el mundo de la nutrición.",
                "content": "En la era de las redes sociales y las dietas de solución rápida, la desinformación nutricional se propaga rápidamente...",
            },
        },
        "available_languages": ["en", "es"],
    },
]


async def seed_catalog(store: CatalogStore) -> int:
    """Load the demo catalog into an empty store.

    Returns the number of articles created; 0 when the store already holds
    subjects.
    """
    if await store.list_subjects():
        logger.info("Catalog already populated, skipping demo data.")
        return 0

    subject_ids: dict[str, int] = {}
    for subject_data in DEFAULT_SUBJECTS:
        subject = await store.create_subject(subject_data)
        subject_ids[subject.slug] = subject.id

    for article_data in SAMPLE_ARTICLES:
        payload = {key: value for key, value in article_data.items() if key != "subject"}
        payload["subject_id"] = subject_ids[article_data["subject"]]
        await store.create_article(payload)

    logger.info("Demo catalog loaded: %d subjects, %d articles", len(DEFAULT_SUBJECTS), len(SAMPLE_ARTICLES))
    return len(SAMPLE_ARTICLES)
