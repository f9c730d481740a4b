#!/usr/bin/env python3
"""
寒热能量计算参考表
寒热值、五味系数、炮制修正、三焦归经、矢量场、配伍规则、体质与服法修正

所有表均为平铺的查找字典，可由外部药典数据整体替换（见 catalog.load_catalog）
"""

from typing import Dict, List, Tuple, Any

from .models import (
    Temperature, Flavor, QiDirection, InteractionType, InteractionRule,
    Constitution, AdministrationMode
)

# ==========================================
# 1. 寒热值 (HV) 映射表：九分对称刻度 [-4, +4]
# ==========================================
THERMAL_VALUES: Dict[Temperature, int] = {
    Temperature.GREAT_HEAT: 4,
    Temperature.HEAT: 3,
    Temperature.WARM: 2,
    Temperature.SLIGHTLY_WARM: 1,
    Temperature.NEUTRAL: 0,
    Temperature.SLIGHTLY_COLD: -1,
    Temperature.COOL: -2,
    Temperature.COLD: -3,
    Temperature.GREAT_COLD: -4,
}

# ==========================================
# 2. 五味强度系数 (WF)：多味取绝对值最大者
# ==========================================
FLAVOR_WEIGHTS: Dict[Flavor, float] = {
    Flavor.PUNGENT: 1.3,
    Flavor.BITTER: 1.2,
    Flavor.SALTY: 1.0,
    Flavor.SOUR: 0.9,
    Flavor.ASTRINGENT: 0.9,
    Flavor.SWEET: 0.8,
    Flavor.BLAND: 0.8,
}

# ==========================================
# 3. 炮制修正值 (ΔHV)
# ==========================================
PROCESSING_DELTAS: Dict[str, float] = {
    '蜜炙': 0.5,
    '酒炙': 0.8,
    '醋炙': -0.2,
    '盐炙': -0.2,
    '姜炙': 0.8,
    '麸炒': 0.5,
    '炒炭': -0.5,
    '炙': 0.5,
    '炒': 0.5,
    '煨': 0.5,
    '酒': 0.8,
    '姜': 0.8,
    '炮': 1.0,
    '炭': -0.5,
    '煅': 0.0,
    '焦': 0.3,
    '蜜': 0.5,
    '醋': -0.2,
    '盐': -0.2,
    '制': 0.0,
    '生': 0.0,
}

# 只能出现在药名末尾的炮制标记（如 地榆炭）
SUFFIX_PROCESSING_TOKENS: Tuple[str, ...] = ('炒炭', '炭')

# ==========================================
# 4. 三焦归经规则（无显式三焦权重时使用）
# 顺序即优先级：心包 先于 心 命中上焦
# ==========================================
CHANNEL_REGIONS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ('upper', ('心包', '心', '肺')),
    ('middle', ('脾', '胃')),
    ('lower', ('肝', '肾', '膀胱', '大肠', '小肠', '胆', '三焦')),
)

# ==========================================
# 5. 矢量场映射
# X轴：收 (-) / 散 (+)；Y轴：降 (-) / 升 (+)
# ==========================================
FLAVOR_VECTOR_X: Dict[Flavor, float] = {
    Flavor.PUNGENT: 0.8,
    Flavor.SOUR: -0.7,
    Flavor.ASTRINGENT: -0.8,
    Flavor.SWEET: 0.0,
    Flavor.BLAND: 0.0,
    Flavor.BITTER: 0.0,
    Flavor.SALTY: 0.0,
}

DIRECTION_VECTOR_Y: Dict[QiDirection, float] = {
    QiDirection.LIFTING: 0.9,
    QiDirection.NEUTRAL: 0.0,
    QiDirection.SINKING: -0.8,
}

# ==========================================
# 6. 体质调节系数
# ==========================================
CONSTITUTION_MODIFIERS: Dict[Constitution, Dict[str, float]] = {
    Constitution.NEUTRAL: {"heat_mult": 1.0, "cold_mult": 1.0},
    Constitution.YANG_DEFICIENCY: {"heat_mult": 1.2, "cold_mult": 0.8},
    Constitution.YIN_DEFICIENCY: {"heat_mult": 0.8, "cold_mult": 1.2},
    Constitution.PHLEGM_DAMPNESS: {"heat_mult": 1.0, "cold_mult": 1.0},
    Constitution.QI_STAGNATION: {"heat_mult": 1.1, "cold_mult": 0.9},
}

# ==========================================
# 7. 服药方式动力学修正（中焦初值增量，转运速率倍数）
# ==========================================
ADMINISTRATION_PHYSICS: Dict[AdministrationMode, Dict[str, Any]] = {
    AdministrationMode.STANDARD: {"middle_boost": 0.0, "rate_mult": 1.0, "note": "常规吸收"},
    AdministrationMode.HOT_PORRIDGE: {"middle_boost": 25.0, "rate_mult": 1.2, "note": "谷气充沛，助药力挥发"},
    AdministrationMode.COLD_SERVE: {"middle_boost": -10.0, "rate_mult": 0.8, "note": "减缓吸收，折热势"},
    AdministrationMode.EMPTY_STOMACH: {"middle_boost": 0.0, "rate_mult": 1.5, "note": "吸收极快，药力专宏"},
    AdministrationMode.POST_MEAL: {"middle_boost": 10.0, "rate_mult": 0.6, "note": "吸收平缓，减毒护胃"},
    AdministrationMode.FREQUENT: {"middle_boost": 0.0, "rate_mult": 0.5, "note": "持续低水平刺激"},
}

# ==========================================
# 8. 同义词映射表
# ==========================================
HERB_ALIASES: Dict[str, str] = {
    # 芍药系列
    '芍药': '白芍',
    '白芍药': '白芍',
    '杭芍': '白芍',
    '赤芍药': '赤芍',
    # 黄芪系列
    '黄耆': '黄芪',
    '北芪': '黄芪',
    '北黄芪': '黄芪',
    # 龙骨牡蛎
    '花龙骨': '龙骨',
    '咸牡蛎': '牡蛎',
    # 茯苓系列
    '云苓': '茯苓',
    '白茯苓': '茯苓',
    '赤茯苓': '茯苓',
    # 附子干姜
    '制附子': '黑顺片',
    '淡附片': '附子',
    '炮干姜': '炮姜',
    '老姜': '生姜',
    '鲜姜': '生姜',
    # 半夏系列
    '法夏': '法半夏',
    # 地黄
    '大生地': '地黄',
    '生地': '地黄',
    '生地黄': '地黄',
    '熟地': '熟地黄',
    # 甘草
    '炙草': '炙甘草',
    '粉甘草': '甘草',
    '国老': '甘草',
    # 其他常用别名
    '杏仁': '苦杏仁',
    '北杏': '苦杏仁',
    '橘皮': '陈皮',
    '广陈皮': '陈皮',
    '新会皮': '陈皮',
    '红枣': '大枣',
    '川穹': '川芎',
    '双花': '金银花',
    '官桂': '肉桂',
    '桂心': '肉桂',
    '枣皮': '山茱萸',
    '山萸肉': '山茱萸',
    '生石膏': '石膏',
    '全当归': '当归',
    '归身': '当归',
    '秦归': '当归',
    '怀牛膝': '牛膝',
    '牛夕': '牛膝',
    '干葛': '葛根',
    '野葛': '葛根',
    '萝卜子': '莱菔子',
    '怀山药': '山药',
    '淮山': '山药',
    '川连': '黄连',
}

# 炮制品 → 原药：配伍规则按原药名书写，炮制品参与配伍时以原药名匹配
PROCESSED_PRODUCT_BASES: Dict[str, str] = {
    '黑顺片': '附子',
    '炮姜': '干姜',
    '炙甘草': '甘草',
    '法半夏': '半夏',
}

# ==========================================
# 9. 配伍规则
# ==========================================
INTERACTION_RULES: Tuple[InteractionRule, ...] = (
    InteractionRule(('麻黄', '桂枝'), '麻桂配', '发汗解表，调和营卫', InteractionType.SYNERGY,
                    '麻黄宣肺开腠，桂枝解肌透邪。二者相须，增强发汗解表之力。'),
    InteractionRule(('桂枝', '白芍'), '桂芍配', '调和阴阳，敛阴和营', InteractionType.SYNERGY,
                    '桂枝辛温主散，白芍酸寒主收。一散一收，调和营卫。'),
    InteractionRule(('柴胡', '黄芩'), '柴芩配', '和解少阳，清热疏肝', InteractionType.SYNERGY,
                    '柴胡升散疏肝，黄芩清泄少阳胆火。一升一降，和解少阳。'),
    InteractionRule(('附子', '干姜'), '姜附配', '回阳救逆，温补脾肾', InteractionType.SYNERGY,
                    '附子走而不守，干姜守而不走。回阳之力大增。'),
    InteractionRule(('黄芪', '当归'), '芪归配', '气血双补，阳生阴长', InteractionType.SYNERGY,
                    '甘温除热，以气生血。'),
    InteractionRule(('石膏', '知母'), '石知配', '清热泻火，滋阴润燥', InteractionType.SYNERGY,
                    '石膏清阳明气分大热，知母苦寒质润，清热之中兼护阴津。'),
    InteractionRule(('大黄', '芒硝'), '硝黄配', '峻下热结', InteractionType.SYNERGY,
                    '大黄荡涤肠胃，芒硝软坚润燥，相须为用，泻下之力倍增。'),
    InteractionRule(('龙骨', '牡蛎'), '龙牡配', '重镇安神，平肝潜阳', InteractionType.SYNERGY,
                    '二者质重沉降，相须为用，潜敛浮阳。'),
    InteractionRule(('麻黄', '桂枝', '苦杏仁', '甘草'), '麻黄汤', '发汗解表，宣肺平喘', InteractionType.SYNERGY,
                    '君臣佐使齐备，风寒表实证之主方。'),
    InteractionRule(('人参', '白术', '茯苓', '甘草'), '四君子汤', '益气健脾', InteractionType.SYNERGY,
                    '甘温益气，健脾渗湿，补气之基础方。'),
    InteractionRule(('甘草', '甘遂'), '甘草反甘遂', '十八反，同用增毒', InteractionType.ANTAGONISM,
                    '十八反：藻戟遂芫俱战草。'),
    InteractionRule(('甘草', '海藻'), '甘草反海藻', '十八反，同用增毒', InteractionType.ANTAGONISM,
                    '十八反：藻戟遂芫俱战草。'),
    InteractionRule(('丁香', '郁金'), '丁香畏郁金', '十九畏，相畏减效', InteractionType.ANTAGONISM,
                    '十九畏：丁香莫与郁金见。'),
    InteractionRule(('人参', '莱菔子'), '人参恶莱菔子', '相恶，莱菔子耗气减弱人参补气之功', InteractionType.ANTAGONISM,
                    '莱菔子下气消食，与人参同用则补气之力被削。'),
    InteractionRule(('黄连', '肉桂'), '交泰配', '寒热并用，交通心肾', InteractionType.MODIFIER,
                    '黄连清心火，肉桂引火归元，寒温互制。'),
    InteractionRule(('附子', '甘草'), '草附配', '甘草缓附子之毒与峻烈', InteractionType.MODIFIER,
                    '甘草甘缓，制附子辛热燥烈之性。'),
    InteractionRule(('桔梗', '牛膝'), '桔膝配', '一升一降，调畅气机', InteractionType.MODIFIER,
                    '桔梗载药上行，牛膝引药下行，升降相因。'),
)

# ==========================================
# 10. 内置药材数据（药典体例原始记录，由 catalog.build_entry 转换）
# ==========================================
DEFAULT_HERB_RECORDS: List[Dict[str, Any]] = [
    {"name": "麻黄", "nature": "温", "flavors": ["辛", "微苦"], "meridians": ["肺", "膀胱"],
     "direction": "升浮", "default_dosage": 6, "efficacy": "发汗散寒，宣肺平喘，利水消肿"},
    {"name": "桂枝", "nature": "温", "flavors": ["辛", "甘"], "meridians": ["心", "肺", "膀胱"],
     "direction": "升浮", "default_dosage": 6, "efficacy": "发汗解肌，温通经脉，助阳化气"},
    {"name": "白芍", "nature": "微寒", "flavors": ["苦", "酸"], "meridians": ["肝", "脾"],
     "direction": "沉降", "default_dosage": 12, "efficacy": "养血调经，敛阴止汗，柔肝止痛"},
    {"name": "赤芍", "nature": "微寒", "flavors": ["苦"], "meridians": ["肝"],
     "direction": "沉降", "default_dosage": 10, "efficacy": "清热凉血，散瘀止痛"},
    {"name": "柴胡", "nature": "微寒", "flavors": ["辛", "苦"], "meridians": ["肝", "胆", "肺"],
     "direction": "升浮", "default_dosage": 10, "efficacy": "疏散退热，疏肝解郁，升举阳气"},
    {"name": "黄芩", "nature": "寒", "flavors": ["苦"], "meridians": ["肺", "胆", "脾", "大肠", "小肠"],
     "direction": "沉降", "default_dosage": 10, "efficacy": "清热燥湿，泻火解毒，止血安胎"},
    {"name": "附子", "nature": "大热", "flavors": ["辛", "甘"], "meridians": ["心", "肾", "脾"],
     "direction": "升浮", "default_dosage": 6, "efficacy": "回阳救逆，补火助阳，散寒止痛"},
    {"name": "黑顺片", "nature": "大热", "flavors": ["辛", "甘"], "meridians": ["心", "肾", "脾"],
     "direction": "升浮", "default_dosage": 6, "efficacy": "回阳救逆，补火助阳，散寒止痛"},
    {"name": "干姜", "nature": "热", "flavors": ["辛"], "meridians": ["脾", "胃", "肾", "心", "肺"],
     "direction": "中转", "default_dosage": 6, "efficacy": "温中散寒，回阳通脉，温肺化饮"},
    {"name": "炮姜", "nature": "热", "flavors": ["辛"], "meridians": ["脾", "胃", "肾"],
     "direction": "沉降", "default_dosage": 6, "efficacy": "温经止血，温中止痛"},
    {"name": "生姜", "nature": "微温", "flavors": ["辛"], "meridians": ["肺", "脾", "胃"],
     "direction": "升浮", "default_dosage": 6, "efficacy": "解表散寒，温中止呕，化痰止咳"},
    {"name": "黄芪", "nature": "微温", "flavors": ["甘"], "meridians": ["肺", "脾"],
     "direction": "升浮", "default_dosage": 15, "efficacy": "补气升阳，固表止汗，利水消肿"},
    {"name": "当归", "nature": "温", "flavors": ["甘", "辛"], "meridians": ["肝", "心", "脾"],
     "direction": "中转", "default_dosage": 10, "efficacy": "补血活血，调经止痛，润肠通便"},
    {"name": "甘草", "nature": "平", "flavors": ["甘"], "meridians": ["心", "肺", "脾", "胃"],
     "direction": "中转", "default_dosage": 6, "efficacy": "补脾益气，清热解毒，调和诸药"},
    {"name": "炙甘草", "nature": "平", "flavors": ["甘"], "meridians": ["心", "肺", "脾", "胃"],
     "direction": "中转", "default_dosage": 6, "efficacy": "补脾和胃，益气复脉"},
    {"name": "人参", "nature": "微温", "flavors": ["甘", "微苦"], "meridians": ["脾", "肺", "心", "肾"],
     "direction": "升浮", "default_dosage": 9, "efficacy": "大补元气，复脉固脱，补脾益肺"},
    {"name": "党参", "nature": "平", "flavors": ["甘"], "meridians": ["脾", "肺"],
     "direction": "中转", "default_dosage": 15, "efficacy": "健脾益肺，养血生津"},
    {"name": "白术", "nature": "温", "flavors": ["苦", "甘"], "meridians": ["脾", "胃"],
     "direction": "中转", "default_dosage": 12, "efficacy": "健脾益气，燥湿利水，止汗安胎"},
    {"name": "茯苓", "nature": "平", "flavors": ["甘", "淡"], "meridians": ["心", "肺", "脾", "肾"],
     "direction": "沉降", "default_dosage": 15, "efficacy": "利水渗湿，健脾宁心"},
    {"name": "半夏", "nature": "温", "flavors": ["辛"], "meridians": ["脾", "胃", "肺"],
     "direction": "沉降", "default_dosage": 9, "efficacy": "燥湿化痰，降逆止呕，消痞散结"},
    {"name": "法半夏", "nature": "温", "flavors": ["辛"], "meridians": ["脾", "胃", "肺"],
     "direction": "沉降", "default_dosage": 9, "efficacy": "燥湿化痰"},
    {"name": "陈皮", "nature": "温", "flavors": ["苦", "辛"], "meridians": ["肺", "脾"],
     "direction": "中转", "default_dosage": 9, "efficacy": "理气健脾，燥湿化痰"},
    {"name": "石膏", "nature": "大寒", "flavors": ["甘", "辛"], "meridians": ["肺", "胃"],
     "direction": "沉降", "default_dosage": 30, "efficacy": "清热泻火，除烦止渴"},
    {"name": "知母", "nature": "寒", "flavors": ["苦", "甘"], "meridians": ["肺", "胃", "肾"],
     "direction": "沉降", "default_dosage": 12, "efficacy": "清热泻火，滋阴润燥"},
    {"name": "黄连", "nature": "寒", "flavors": ["苦"], "meridians": ["心", "脾", "胃", "肝", "胆", "大肠"],
     "direction": "沉降", "default_dosage": 5, "efficacy": "清热燥湿，泻火解毒"},
    {"name": "黄柏", "nature": "寒", "flavors": ["苦"], "meridians": ["肾", "膀胱"],
     "direction": "沉降", "default_dosage": 10, "efficacy": "清热燥湿，泻火除蒸，解毒疗疮"},
    {"name": "大黄", "nature": "寒", "flavors": ["苦"], "meridians": ["脾", "胃", "大肠", "肝", "心包"],
     "direction": "沉降", "default_dosage": 6, "efficacy": "泻下攻积，清热泻火，凉血解毒，逐瘀通经"},
    {"name": "芒硝", "nature": "寒", "flavors": ["咸", "苦"], "meridians": ["胃", "大肠"],
     "direction": "沉降", "default_dosage": 10, "efficacy": "泻下通便，润燥软坚，清火消肿"},
    {"name": "肉桂", "nature": "大热", "flavors": ["辛", "甘"], "meridians": ["肾", "脾", "心", "肝"],
     "direction": "沉降", "default_dosage": 3, "efficacy": "补火助阳，引火归元，散寒止痛"},
    {"name": "熟地黄", "nature": "微温", "flavors": ["甘"], "meridians": ["肝", "肾"],
     "direction": "沉降", "default_dosage": 15, "efficacy": "补血滋阴，益精填髓"},
    {"name": "地黄", "nature": "寒", "flavors": ["甘"], "meridians": ["心", "肝", "肾"],
     "direction": "沉降", "default_dosage": 15, "efficacy": "清热凉血，养阴生津"},
    {"name": "川芎", "nature": "温", "flavors": ["辛"], "meridians": ["肝", "胆", "心包"],
     "direction": "升浮", "default_dosage": 6, "efficacy": "活血行气，祛风止痛"},
    {"name": "薄荷", "nature": "凉", "flavors": ["辛"], "meridians": ["肺", "肝"],
     "direction": "升浮", "default_dosage": 6, "efficacy": "疏散风热，清利头目，利咽透疹"},
    {"name": "金银花", "nature": "寒", "flavors": ["甘"], "meridians": ["肺", "心", "胃"],
     "direction": "中转", "default_dosage": 15, "efficacy": "清热解毒，疏散风热"},
    {"name": "连翘", "nature": "微寒", "flavors": ["苦"], "meridians": ["肺", "心", "小肠"],
     "direction": "升浮", "default_dosage": 12, "efficacy": "清热解毒，消肿散结，疏散风热"},
    {"name": "五味子", "nature": "温", "flavors": ["酸", "甘"], "meridians": ["肺", "心", "肾"],
     "direction": "沉降", "default_dosage": 6, "efficacy": "收敛固涩，益气生津，补肾宁心"},
    {"name": "山茱萸", "nature": "微温", "flavors": ["酸", "涩"], "meridians": ["肝", "肾"],
     "direction": "沉降", "default_dosage": 12, "efficacy": "补益肝肾，收涩固脱"},
    {"name": "乌梅", "nature": "平", "flavors": ["酸", "涩"], "meridians": ["肝", "脾", "肺", "大肠"],
     "direction": "沉降", "default_dosage": 6, "efficacy": "敛肺，涩肠，生津，安蛔"},
    {"name": "龙骨", "nature": "平", "flavors": ["甘", "涩"], "meridians": ["心", "肝", "肾"],
     "direction": "沉降", "default_dosage": 20, "efficacy": "镇惊安神，平肝潜阳，收敛固涩"},
    {"name": "牡蛎", "nature": "微寒", "flavors": ["咸"], "meridians": ["肝", "胆", "肾"],
     "direction": "沉降", "default_dosage": 20, "efficacy": "重镇安神，潜阳补阴，软坚散结"},
    {"name": "桔梗", "nature": "平", "flavors": ["苦", "辛"], "meridians": ["肺"],
     "direction": "升浮", "default_dosage": 6, "efficacy": "宣肺，利咽，祛痰，排脓",
     "region_weights": {"upper": 1.0, "middle": 0.0, "lower": 0.0}},
    {"name": "牛膝", "nature": "平", "flavors": ["苦", "甘", "酸"], "meridians": ["肝", "肾"],
     "direction": "沉降", "default_dosage": 12, "efficacy": "逐瘀通经，补肝肾，强筋骨，引血下行",
     "region_weights": {"upper": 0.0, "middle": 0.2, "lower": 0.8}},
    {"name": "升麻", "nature": "微寒", "flavors": ["辛", "微甘"], "meridians": ["肺", "脾", "胃", "大肠"],
     "direction": "升浮", "default_dosage": 6, "efficacy": "发表透疹，清热解毒，升举阳气"},
    {"name": "苦杏仁", "nature": "微温", "flavors": ["苦"], "meridians": ["肺", "大肠"],
     "direction": "沉降", "default_dosage": 9, "efficacy": "降气止咳平喘，润肠通便"},
    {"name": "细辛", "nature": "温", "flavors": ["辛"], "meridians": ["心", "肺", "肾"],
     "direction": "升浮", "default_dosage": 3, "efficacy": "解表散寒，祛风止痛，通窍，温肺化饮"},
    {"name": "甘遂", "nature": "寒", "flavors": ["苦"], "meridians": ["肺", "肾", "大肠"],
     "direction": "沉降", "default_dosage": 1, "efficacy": "泻水逐饮，消肿散结"},
    {"name": "海藻", "nature": "寒", "flavors": ["苦", "咸"], "meridians": ["肝", "胃", "肾"],
     "direction": "沉降", "default_dosage": 10, "efficacy": "消痰软坚散结，利水消肿"},
    {"name": "大枣", "nature": "温", "flavors": ["甘"], "meridians": ["脾", "胃", "心"],
     "direction": "中转", "default_dosage": 10, "efficacy": "补中益气，养血安神"},
    {"name": "枸杞子", "nature": "平", "flavors": ["甘"], "meridians": ["肝", "肾"],
     "direction": "中转", "default_dosage": 12, "efficacy": "滋补肝肾，益精明目"},
    {"name": "山药", "nature": "平", "flavors": ["甘"], "meridians": ["脾", "肺", "肾"],
     "direction": "中转", "default_dosage": 15, "efficacy": "补脾养胃，生津益肺，补肾涩精"},
    {"name": "泽泻", "nature": "寒", "flavors": ["甘", "淡"], "meridians": ["肾", "膀胱"],
     "direction": "沉降", "default_dosage": 10, "efficacy": "利水渗湿，泄热，化浊降脂"},
    {"name": "葛根", "nature": "凉", "flavors": ["甘", "辛"], "meridians": ["脾", "胃", "肺"],
     "direction": "升浮", "default_dosage": 15, "efficacy": "解肌退热，生津止渴，透疹，升阳止泻"},
    {"name": "阿胶", "nature": "平", "flavors": ["甘"], "meridians": ["肺", "肝", "肾"],
     "direction": "中转", "default_dosage": 10, "efficacy": "补血滋阴，润燥，止血"},
    {"name": "莱菔子", "nature": "平", "flavors": ["辛", "甘"], "meridians": ["肺", "脾", "胃"],
     "direction": "沉降", "default_dosage": 9, "efficacy": "消食除胀，降气化痰"},
    {"name": "丁香", "nature": "温", "flavors": ["辛"], "meridians": ["脾", "胃", "肺", "肾"],
     "direction": "沉降", "default_dosage": 3, "efficacy": "温中降逆，补肾助阳"},
    {"name": "郁金", "nature": "寒", "flavors": ["辛", "苦"], "meridians": ["肝", "心", "肺"],
     "direction": "沉降", "default_dosage": 10, "efficacy": "活血止痛，行气解郁，清心凉血"},
]
