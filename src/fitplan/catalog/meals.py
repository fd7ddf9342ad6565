"""Built-in meal templates for each meal time.

Each template is a complete vegetarian meal. Its items carry baseline
nutrition, and the macro scaler adjusts those values proportionally toward
a calorie target.
"""

from __future__ import annotations

from fitplan.catalog.models import MealItemTemplate, MealTemplate, MealTime


def _item(
    name: str, quantity: str, calories: float, protein: float, carbs: float, fats: float
) -> MealItemTemplate:
    return MealItemTemplate(name, quantity, calories, protein, carbs, fats)


# =============================================================================
# Breakfast
# =============================================================================

BREAKFAST_TEMPLATES = (
    MealTemplate(
        id="breakfast-poha",
        name="Protein-Rich Poha",
        meal_time=MealTime.BREAKFAST,
        items=(
            _item("Poha (flattened rice)", "1 cup", 180, 3, 40, 1),
            _item("Roasted peanuts", "30g", 170, 7, 5, 14),
            _item("Mixed vegetables", "1 cup", 50, 2, 10, 0),
            _item("Greek yogurt", "100g", 100, 10, 5, 5),
        ),
        instructions=(
            "Rinse poha and drain. Heat oil, add mustard seeds, curry leaves. "
            "Add vegetables, saute. Mix in poha, turmeric, salt. Cook 3-4 minutes. "
            "Garnish with peanuts and coriander. Serve with Greek yogurt on the side."
        ),
        alternatives="Substitute poha with oats or quinoa. Replace peanuts with cashews or almonds.",
    ),
    MealTemplate(
        id="breakfast-paneer-bhurji",
        name="Paneer Bhurji with Whole Wheat Toast",
        meal_time=MealTime.BREAKFAST,
        items=(
            _item("Crumbled paneer", "150g", 270, 21, 6, 18),
            _item("Whole wheat toast", "2 slices", 160, 6, 28, 2),
            _item("Tomatoes and onions", "1 cup", 40, 1, 9, 0),
            _item("Ghee", "1 tsp", 45, 0, 0, 5),
        ),
        instructions=(
            "Heat ghee, add cumin seeds, onions. Add tomatoes, spices. Mix in "
            "crumbled paneer, cook 5 minutes. Serve hot with toasted whole wheat bread."
        ),
        alternatives="Replace paneer with tofu for vegan option. Use multigrain bread instead of whole wheat.",
    ),
    MealTemplate(
        id="breakfast-moong-chilla",
        name="Moong Dal Chilla with Mint Chutney",
        meal_time=MealTime.BREAKFAST,
        items=(
            _item("Moong dal batter", "1 cup", 200, 15, 35, 1),
            _item("Paneer stuffing", "50g", 90, 7, 2, 6),
            _item("Mint chutney", "2 tbsp", 20, 1, 4, 0),
            _item("Oil for cooking", "1 tbsp", 120, 0, 0, 14),
        ),
        instructions=(
            "Soak moong dal overnight, grind to smooth batter. Add salt, spices. "
            "Pour on hot griddle, spread thin. Add paneer stuffing, fold. Cook until "
            "golden. Serve with mint chutney."
        ),
        alternatives="Use besan (chickpea flour) instead of moong dal. Stuff with mixed vegetables for variation.",
    ),
    MealTemplate(
        id="breakfast-protein-oatmeal",
        name="Protein Oatmeal Bowl",
        meal_time=MealTime.BREAKFAST,
        items=(
            _item("Rolled oats", "1/2 cup", 150, 5, 27, 3),
            _item("Protein powder", "1 scoop", 120, 24, 3, 2),
            _item("Mixed berries", "1 cup", 70, 1, 17, 0),
            _item("Almonds", "15 pieces", 100, 4, 4, 9),
            _item("Honey", "1 tbsp", 60, 0, 17, 0),
        ),
        instructions=(
            "Cook oats in milk or water until soft. Mix in protein powder. "
            "Top with berries, almonds, and drizzle honey."
        ),
        alternatives="Use quinoa flakes instead of oats. Replace berries with banana and dates.",
    ),
    MealTemplate(
        id="breakfast-idli-sambar",
        name="Idli with Sambar and Coconut Chutney",
        meal_time=MealTime.BREAKFAST,
        items=(
            _item("Idli (rice cakes)", "4 pieces", 160, 4, 34, 1),
            _item("Sambar (lentil stew)", "1 cup", 120, 6, 20, 2),
            _item("Coconut chutney", "3 tbsp", 90, 1, 5, 8),
            _item("Roasted chana", "30g", 130, 8, 18, 2),
        ),
        instructions=(
            "Steam idlis for 10-12 minutes. Prepare sambar with mixed vegetables "
            "and dal. Grind coconut chutney with green chilies. Serve hot with side "
            "of roasted chana for extra protein."
        ),
        alternatives="Replace idli with dosa. Add a side of paneer for more protein.",
    ),
)


# =============================================================================
# Lunch
# =============================================================================

LUNCH_TEMPLATES = (
    MealTemplate(
        id="lunch-rajma-rice",
        name="Rajma Rice Bowl",
        meal_time=MealTime.LUNCH,
        items=(
            _item("Rajma (kidney beans)", "1 cup", 225, 15, 40, 1),
            _item("Brown rice", "1 cup cooked", 215, 5, 45, 2),
            _item("Mixed vegetable salad", "1 cup", 50, 2, 10, 0),
            _item("Curd (yogurt)", "1/2 cup", 60, 4, 6, 2),
        ),
        instructions=(
            "Pressure cook rajma with onions, tomatoes, ginger-garlic, spices. "
            "Simmer until thick gravy forms. Serve with steamed brown rice, salad, and curd."
        ),
        alternatives="Substitute rajma with chole (chickpeas). Use quinoa instead of rice for more protein.",
    ),
    MealTemplate(
        id="lunch-paneer-tikka-quinoa",
        name="Paneer Tikka with Quinoa",
        meal_time=MealTime.LUNCH,
        items=(
            _item("Grilled paneer tikka", "200g", 360, 28, 8, 24),
            _item("Quinoa", "1 cup cooked", 220, 8, 40, 4),
            _item("Mint chutney", "2 tbsp", 20, 1, 4, 0),
            _item("Grilled vegetables", "1 cup", 70, 2, 12, 2),
        ),
        instructions=(
            "Marinate paneer cubes in yogurt, spices, lemon juice. Grill until "
            "charred. Serve with cooked quinoa, grilled vegetables, and mint chutney."
        ),
        alternatives="Use tofu instead of paneer. Replace quinoa with brown rice or millet.",
    ),
    MealTemplate(
        id="lunch-dal-tadka",
        name="Dal Tadka with Roti",
        meal_time=MealTime.LUNCH,
        items=(
            _item("Mixed dal (toor, moong)", "1 cup", 200, 14, 34, 1),
            _item("Whole wheat roti", "3 pieces", 240, 9, 45, 3),
            _item("Vegetable sabzi", "1 cup", 100, 3, 15, 4),
            _item("Green salad", "1 cup", 30, 1, 6, 0),
        ),
        instructions=(
            "Pressure cook dal with turmeric, salt. Prepare tadka with ghee, cumin, "
            "garlic, chilies. Pour over dal. Serve with rotis, sabzi, and fresh salad."
        ),
        alternatives="Use multigrain rotis. Add a side of paneer bhurji for more protein.",
    ),
    MealTemplate(
        id="lunch-chickpea-buddha-bowl",
        name="Chickpea Buddha Bowl",
        meal_time=MealTime.LUNCH,
        items=(
            _item("Roasted chickpeas", "1 cup", 270, 14, 45, 4),
            _item("Brown rice", "1/2 cup cooked", 108, 2.5, 22, 1),
            _item("Roasted vegetables", "1 cup", 100, 3, 18, 3),
            _item("Tahini dressing", "2 tbsp", 90, 3, 3, 8),
            _item("Avocado slices", "1/4 avocado", 60, 1, 3, 5),
        ),
        instructions=(
            "Roast chickpeas with spices until crispy. Arrange bowl with rice base, "
            "roasted vegetables, chickpeas, avocado. Drizzle tahini dressing."
        ),
        alternatives="Use quinoa instead of rice. Replace chickpeas with black beans or lentils.",
    ),
    MealTemplate(
        id="lunch-chole-kulcha",
        name="Chole with Kulcha",
        meal_time=MealTime.LUNCH,
        items=(
            _item("Chole (chickpeas)", "1 cup", 210, 12, 35, 3),
            _item("Kulcha (leavened bread)", "2 pieces", 280, 8, 52, 4),
            _item("Onion salad", "1 cup", 40, 1, 9, 0),
            _item("Pickle", "1 tbsp", 20, 0, 3, 1),
        ),
        instructions=(
            "Cook chickpeas with onions, tomatoes, chole masala. Simmer until thick. "
            "Serve with warm kulcha, onion salad, and pickle."
        ),
        alternatives="Replace kulcha with whole wheat naan or roti. Add a side of paneer for more protein.",
    ),
)


# =============================================================================
# Dinner
# =============================================================================

DINNER_TEMPLATES = (
    MealTemplate(
        id="dinner-khichdi",
        name="Vegetable Khichdi",
        meal_time=MealTime.DINNER,
        items=(
            _item("Rice and moong dal mix", "1 cup cooked", 220, 10, 42, 1),
            _item("Mixed vegetables", "1 cup", 60, 2, 12, 0),
            _item("Ghee", "1 tsp", 45, 0, 0, 5),
            _item("Cucumber raita", "1/2 cup", 50, 3, 6, 2),
        ),
        instructions=(
            "Pressure cook rice, moong dal, vegetables with turmeric, cumin, salt. "
            "Temper with ghee and cumin seeds. Serve with cucumber raita."
        ),
        alternatives="Add paneer cubes for more protein. Use millet instead of rice for variation.",
    ),
    MealTemplate(
        id="dinner-grilled-tofu",
        name="Grilled Tofu with Roasted Vegetables",
        meal_time=MealTime.DINNER,
        items=(
            _item("Marinated grilled tofu", "200g", 180, 20, 4, 10),
            _item("Roasted vegetables", "2 cups", 150, 4, 25, 5),
            _item("Quinoa", "1/2 cup cooked", 110, 4, 20, 2),
            _item("Olive oil", "1 tsp", 40, 0, 0, 5),
        ),
        instructions=(
            "Marinate tofu in soy sauce, garlic, spices. Grill until golden. Roast "
            "mixed vegetables with olive oil. Serve with quinoa."
        ),
        alternatives="Replace tofu with paneer. Use brown rice or cauliflower rice instead of quinoa.",
    ),
    MealTemplate(
        id="dinner-palak-dal",
        name="Palak Dal with Roti",
        meal_time=MealTime.DINNER,
        items=(
            _item("Spinach dal", "1 cup", 180, 12, 28, 2),
            _item("Whole wheat roti", "2 pieces", 160, 6, 30, 2),
            _item("Vegetable salad", "1 cup", 40, 2, 8, 0),
            _item("Lemon wedge", "1 piece", 5, 0, 1, 0),
        ),
        instructions=(
            "Cook toor dal with spinach, tomatoes, turmeric. Temper with cumin, "
            "garlic. Serve with rotis and salad."
        ),
        alternatives="Use methi (fenugreek) instead of spinach. Add a side of paneer for more protein.",
    ),
    MealTemplate(
        id="dinner-vegetable-soup",
        name="Mixed Vegetable Soup with Whole Grain Bread",
        meal_time=MealTime.DINNER,
        items=(
            _item("Thick vegetable soup", "2 cups", 150, 6, 28, 2),
            _item("Whole grain bread", "2 slices", 160, 8, 28, 2),
            _item("Grilled paneer", "50g", 90, 7, 2, 6),
            _item("Mixed salad", "1 cup", 40, 2, 8, 0),
        ),
        instructions=(
            "Prepare vegetable soup with carrots, beans, tomatoes, lentils. Blend "
            "partially for thickness. Serve with toasted bread, grilled paneer, and salad."
        ),
        alternatives="Make it creamy with cashew paste. Add more beans for protein.",
    ),
    MealTemplate(
        id="dinner-vegetable-pulao",
        name="Vegetable Pulao with Raita",
        meal_time=MealTime.DINNER,
        items=(
            _item("Vegetable pulao", "1 cup", 240, 6, 45, 4),
            _item("Mixed dal", "1/2 cup", 100, 7, 17, 0.5),
            _item("Boondi raita", "1/2 cup", 80, 3, 10, 3),
            _item("Papad", "1 piece", 30, 1, 5, 1),
        ),
        instructions=(
            "Cook basmati rice with mixed vegetables, whole spices. Serve with dal, "
            "raita, and roasted papad."
        ),
        alternatives="Use brown rice for more fiber. Add paneer or soya chunks for protein boost.",
    ),
)


# =============================================================================
# Snacks
# =============================================================================

SNACK_TEMPLATES = (
    MealTemplate(
        id="snack-roasted-chana",
        name="Roasted Chana Mix",
        meal_time=MealTime.SNACK,
        items=(
            _item("Roasted chana", "50g", 180, 10, 27, 3),
            _item("Mixed nuts", "20g", 120, 4, 4, 10),
            _item("Apple", "1 medium", 95, 0, 25, 0),
        ),
        instructions="Mix roasted chana with nuts, sprinkle chaat masala. Enjoy with apple slices.",
        alternatives="Replace chana with makhana. Add dates for natural sweetness.",
    ),
    MealTemplate(
        id="snack-yogurt-parfait",
        name="Greek Yogurt Parfait",
        meal_time=MealTime.SNACK,
        items=(
            _item("Greek yogurt", "200g", 200, 20, 10, 10),
            _item("Mixed berries", "1/2 cup", 35, 0.5, 8, 0),
            _item("Granola", "30g", 130, 3, 20, 5),
            _item("Honey", "1 tsp", 20, 0, 6, 0),
        ),
        instructions="Layer Greek yogurt with berries and granola. Drizzle honey on top.",
        alternatives="Use homemade yogurt. Replace granola with chopped nuts and seeds.",
    ),
    MealTemplate(
        id="snack-paneer-tikka-bites",
        name="Paneer Tikka Bites",
        meal_time=MealTime.SNACK,
        items=(
            _item("Grilled paneer cubes", "100g", 180, 14, 3, 12),
            _item("Bell peppers", "1/2 cup", 25, 1, 6, 0),
            _item("Mint chutney", "2 tbsp", 20, 1, 4, 0),
        ),
        instructions="Marinate paneer cubes in yogurt and spices. Grill with bell peppers. Serve with mint chutney.",
        alternatives="Use tofu instead of paneer. Add cherry tomatoes for variety.",
    ),
    MealTemplate(
        id="snack-protein-smoothie",
        name="Protein Smoothie",
        meal_time=MealTime.SNACK,
        items=(
            _item("Banana", "1 medium", 105, 1, 27, 0),
            _item("Protein powder", "1 scoop", 120, 24, 3, 2),
            _item("Almond milk", "1 cup", 40, 1, 2, 3),
            _item("Peanut butter", "1 tbsp", 95, 4, 3, 8),
            _item("Oats", "2 tbsp", 60, 2, 11, 1),
        ),
        instructions="Blend all ingredients until smooth. Serve immediately.",
        alternatives="Use berries instead of banana. Replace almond milk with soy milk for more protein.",
    ),
    MealTemplate(
        id="snack-sprouts-chaat",
        name="Sprouts Chaat",
        meal_time=MealTime.SNACK,
        items=(
            _item("Mixed sprouts", "1 cup", 120, 10, 20, 1),
            _item("Chopped vegetables", "1/2 cup", 25, 1, 5, 0),
            _item("Lemon juice", "1 tbsp", 5, 0, 1, 0),
            _item("Roasted peanuts", "20g", 115, 5, 3, 10),
        ),
        instructions=(
            "Mix boiled sprouts with chopped onions, tomatoes, cucumber. Add chaat "
            "masala, lemon juice, peanuts. Toss well."
        ),
        alternatives="Add pomegranate seeds for sweetness. Use boiled chana instead of sprouts.",
    ),
)


MEAL_TEMPLATES: dict[MealTime, tuple[MealTemplate, ...]] = {
    MealTime.BREAKFAST: BREAKFAST_TEMPLATES,
    MealTime.LUNCH: LUNCH_TEMPLATES,
    MealTime.DINNER: DINNER_TEMPLATES,
    MealTime.SNACK: SNACK_TEMPLATES,
}
