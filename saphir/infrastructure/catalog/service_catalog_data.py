from __future__ import annotations

from saphir.domain.entities.service_catalog import (
    Category,
    Option,
    OptionCategory,
    OptionGroup,
    Service,
)


def _group(category: OptionCategory, *options: tuple[str, str, int]) -> OptionGroup:
    return OptionGroup(
        category=category,
        options=tuple(Option(option_id=oid, name=name, price_delta=price) for oid, name, price in options),
    )


def _options(
    oils: list[tuple[str, str, int]],
    music: list[tuple[str, str, int]],
    intensity: list[tuple[str, str, int]],
) -> dict[OptionCategory, OptionGroup]:
    return {
        OptionCategory.OIL: _group(OptionCategory.OIL, *oils),
        OptionCategory.MUSIC: _group(OptionCategory.MUSIC, *music),
        OptionCategory.INTENSITY: _group(OptionCategory.INTENSITY, *intensity),
    }


CATEGORIES: list[Category] = [
    Category(category_id="all", name="Tous"),
    Category(category_id="massages", name="Massages"),
    Category(category_id="visage", name="Soins du Visage"),
    Category(category_id="hammam", name="Rituels Hammam"),
    Category(category_id="signature", name="Soins Signature"),
]

_SERVICES: list[Service] = [
    Service(
        service_id="massage-relaxant",
        name="Massage Relaxant Or Rose",
        category="massages",
        description="Un voyage sensoriel aux huiles précieuses pour une détente absolue du corps et de l'esprit.",
        duration="60 min",
        base_price=35000,
        image="massage.jpg",
        options=_options(
            oils=[
                ("lavande", "Lavande Provence", 0),
                ("eucalyptus", "Eucalyptus Premium", 3000),
                ("rose", "Rose de Damas", 5000),
            ],
            music=[
                ("zen", "Zen & Nature", 0),
                ("piano", "Piano Classique", 0),
                ("silence", "Silence Absolu", 0),
            ],
            intensity=[
                ("douce", "Douce", 0),
                ("moyenne", "Moyenne", 0),
                ("intense", "Intense", 0),
            ],
        ),
    ),
    Service(
        service_id="massage-pierres",
        name="Massage aux Pierres Chaudes",
        category="massages",
        description="L'alliance parfaite de la chaleur des pierres volcaniques et des techniques ancestrales.",
        duration="90 min",
        base_price=55000,
        image="massage.jpg",
        options=_options(
            oils=[
                ("argan", "Argan Bio", 0),
                ("jasmin", "Jasmin d'Orient", 4000),
                ("oud", "Oud Royal", 8000),
            ],
            music=[
                ("zen", "Zen & Nature", 0),
                ("oriental", "Oriental Dreams", 0),
                ("silence", "Silence Absolu", 0),
            ],
            intensity=[
                ("douce", "Douce", 0),
                ("moyenne", "Moyenne", 0),
                ("intense", "Intense", 0),
            ],
        ),
    ),
    Service(
        service_id="facial-eclat",
        name="Soin Visage Éclat Diamant",
        category="visage",
        description="Révélez la luminosité naturelle de votre peau avec notre soin signature aux actifs précieux.",
        duration="75 min",
        base_price=45000,
        image="facial.jpg",
        options=_options(
            oils=[
                ("hyaluronique", "Acide Hyaluronique", 0),
                ("vitaminec", "Vitamine C Pure", 5000),
                ("or", "Masque à l'Or 24K", 15000),
            ],
            music=[
                ("spa", "Spa Melody", 0),
                ("nature", "Sons de la Nature", 0),
                ("silence", "Silence Absolu", 0),
            ],
            intensity=[
                ("hydratant", "Hydratant", 0),
                ("antiage", "Anti-Âge", 5000),
                ("detox", "Détox Profond", 3000),
            ],
        ),
    ),
    Service(
        service_id="hammam-royal",
        name="Rituel Hammam Royal",
        category="hammam",
        description="Une expérience complète inspirée des traditions orientales : gommage, enveloppement et massage.",
        duration="120 min",
        base_price=75000,
        image="hammam.jpg",
        options=_options(
            oils=[
                ("savonnoir", "Savon Noir Traditionnel", 0),
                ("argan", "Huile d'Argan Pure", 5000),
                ("ambre", "Ambre & Musc", 7000),
            ],
            music=[
                ("oriental", "Musique Orientale", 0),
                ("meditation", "Méditation", 0),
                ("silence", "Silence Absolu", 0),
            ],
            intensity=[
                ("doux", "Gommage Doux", 0),
                ("moyen", "Gommage Moyen", 0),
                ("intense", "Gommage Intense", 0),
            ],
        ),
    ),
    Service(
        service_id="signature-saphir",
        name="L'Expérience SAPHIR",
        category="signature",
        description="Notre rituel exclusif combinant les meilleurs soins dans une parenthèse de luxe ultime.",
        duration="180 min",
        base_price=150000,
        image="signature.jpg",
        options=_options(
            oils=[
                ("signature", "Mélange Signature SAPHIR", 0),
                ("diamant", "Élixir aux Diamants", 20000),
                ("royal", "Royal Collection", 30000),
            ],
            music=[
                ("live", "Musique Live (Harpe)", 25000),
                ("personnalisee", "Playlist Personnalisée", 0),
                ("silence", "Silence Absolu", 0),
            ],
            intensity=[
                ("equilibre", "Équilibré", 0),
                ("intense", "Intense & Profond", 0),
                ("zen", "Zen & Méditatif", 0),
            ],
        ),
    ),
]

SERVICE_CATALOG: dict[str, Service] = {service.service_id: service for service in _SERVICES}
