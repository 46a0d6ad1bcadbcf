"""Built-in phrase data for offline translation.

Entries are ordered ``(key, translation)`` pairs. When a key appears more than
once the first pair is kept.
"""

from __future__ import annotations

ENGLISH_TO_MANDARIN: tuple[tuple[str, str], ...] = (
    ("hello", "你好"),
    ("hi", "您好"),
    ("how are you", "您好吗？"),
    ("how are you feeling", "您感觉怎么样？"),
    ("what is your name", "您叫什么名字？"),
    ("how do you feel", "您感觉怎么样？"),
    ("where does it hurt", "哪里疼？"),
    ("where is the pain", "疼痛在哪里？"),
    ("can you tell me where the pain is", "您能告诉我疼痛在哪里吗？"),
    ("what kind of pain", "什么样的疼痛？"),
    ("when did this start", "这是什么时候开始的？"),
    ("when did this pain start", "这个疼痛是什么时候开始的？"),
    ("how long have you had this", "您有这个症状多长时间了？"),
    ("on a scale of 1 to 10", "从1到10分"),
    ("take this medication", "服用这个药物"),
    ("take this medication twice daily", "每天服用这个药物两次"),
    ("take this medication twice daily with food", "每天随餐服用这个药物两次"),
    ("with food", "随餐服用"),
    ("before meals", "饭前服用"),
    ("after meals", "饭后服用"),
    ("thank you", "谢谢"),
    ("goodbye", "再见"),
    ("please sit down", "请坐"),
    ("open your mouth", "请张开嘴"),
    ("take a deep breath", "请深呼吸"),
)

ENGLISH_TO_CANTONESE: tuple[tuple[str, str], ...] = (
    ("hello", "你好"),
    ("hi", "你好"),
    ("how are you", "你好嗎？"),
    ("how are you feeling", "你感覺點樣？"),
    ("what is your name", "你叫咩名？"),
    ("how do you feel", "你覺得點樣？"),
    ("where does it hurt", "邊度痛？"),
    ("where is the pain", "痛喺邊度？"),
    ("can you tell me where the pain is", "你可以話我知痛喺邊度嗎？"),
    ("what kind of pain", "咩種痛？"),
    ("when did this start", "幾時開始嘅？"),
    ("when did this pain start", "呢個痛幾時開始嘅？"),
    ("how long have you had this", "你有呢個症狀幾耐？"),
    ("on a scale of 1 to 10", "由1到10分"),
    ("take this medication", "食呢隻藥"),
    ("take this medication twice daily", "呢隻藥一日食兩次"),
    (
        "take this medication twice daily with food",
        "呢隻藥要一日食兩次，記住要同食物一齊食",
    ),
    ("with food", "同食物一齊食"),
    ("before meals", "飯前食"),
    ("after meals", "飯後食"),
    ("thank you", "多謝"),
    ("goodbye", "再見"),
    ("please sit down", "請坐"),
    ("open your mouth", "請張開口"),
    ("take a deep breath", "請深呼吸"),
)

MANDARIN_TO_ENGLISH: tuple[tuple[str, str], ...] = (
    # Greetings and general state
    ("你好", "Hello"),
    ("我很好", "I am fine"),
    ("我不舒服", "I don't feel well"),
    ("我不好", "I am not well"),
    ("我病了", "I am sick"),
    ("我感觉不好", "I don't feel good"),
    # Location of pain
    ("这里疼", "It hurts here"),
    ("那里疼", "It hurts there"),
    ("头疼", "I have a headache"),
    ("头痛", "I have a headache"),
    ("偏头痛", "I have a migraine"),
    ("肚子疼", "My stomach hurts"),
    ("胃疼", "My stomach hurts"),
    ("肚子痛", "My stomach hurts"),
    ("喉咙疼", "My throat hurts"),
    ("嗓子疼", "My throat hurts"),
    ("扁桃体发炎", "My tonsils are inflamed"),
    ("背疼", "My back hurts"),
    ("腰疼", "My lower back hurts"),
    ("脖子疼", "My neck hurts"),
    ("肩膀疼", "My shoulder hurts"),
    ("胸疼", "My chest hurts"),
    ("胸口疼", "My chest hurts"),
    ("心脏疼", "My heart hurts"),
    ("膝盖疼", "My knee hurts"),
    ("腿疼", "My leg hurts"),
    ("脚疼", "My foot hurts"),
    ("手疼", "My hand hurts"),
    ("胳膊疼", "My arm hurts"),
    ("眼睛疼", "My eyes hurt"),
    ("耳朵疼", "My ear hurts"),
    ("牙疼", "I have a toothache"),
    ("牙痛", "I have a toothache"),
    # Symptoms
    ("发烧", "I have a fever"),
    ("发热", "I have a fever"),
    ("高烧", "I have a high fever"),
    ("低烧", "I have a low fever"),
    ("咳嗽", "I am coughing"),
    ("干咳", "I have a dry cough"),
    ("咳痰", "I am coughing up phlegm"),
    ("流鼻涕", "I have a runny nose"),
    ("鼻塞", "My nose is blocked"),
    ("打喷嚏", "I am sneezing"),
    ("感冒", "I have a cold"),
    ("感冒了", "I have a cold"),
    ("流感", "I have the flu"),
    ("恶心", "I feel nauseous"),
    ("想吐", "I feel like vomiting"),
    ("呕吐", "I am vomiting"),
    ("拉肚子", "I have diarrhea"),
    ("腹泻", "I have diarrhea"),
    ("便秘", "I am constipated"),
    ("头晕", "I feel dizzy"),
    ("头昏", "I feel dizzy"),
    ("晕", "I feel dizzy"),
    ("疲倦", "I feel tired"),
    ("累", "I am tired"),
    ("乏力", "I feel weak"),
    ("没力气", "I have no energy"),
    ("失眠", "I have insomnia"),
    ("睡不着", "Can't sleep"),
    ("睡不好", "Can't sleep well"),
    ("食欲不振", "Loss of appetite"),
    ("吃不下", "Can't eat"),
    ("没胃口", "No appetite"),
    ("心跳快", "Fast heartbeat"),
    ("心慌", "Heart palpitations"),
    ("气短", "Shortness of breath"),
    ("呼吸困难", "Difficulty breathing"),
    ("过敏", "I am allergic"),
    ("过敏反应", "Allergic reaction"),
    ("皮疹", "I have a rash"),
    ("发痒", "It's itchy"),
    ("痒", "It's itchy"),
    ("红肿", "Red and swollen"),
    ("肿胀", "Swelling"),
    # Pain descriptions
    ("疼", "It hurts"),
    ("痛", "It's painful"),
    ("很疼", "It hurts a lot"),
    ("非常疼", "It hurts very much"),
    ("剧痛", "Severe pain"),
    ("隐痛", "Dull pain"),
    ("有点疼", "It hurts a little"),
    ("一直疼", "It hurts all the time"),
    ("有时候疼", "It hurts sometimes"),
    ("刺痛", "Sharp pain"),
    ("针扎一样疼", "Like needle pricks"),
    ("闷痛", "Dull pain"),
    ("胀痛", "Bloating pain"),
    ("酸痛", "Aching pain"),
    ("隐隐作痛", "Dull aching"),
    ("一阵一阵的疼", "Comes and goes"),
    ("越来越疼", "Getting worse"),
    ("没那么疼了", "Not as painful now"),
    ("疼得厉害", "Very painful"),
    ("火辣辣的疼", "Burning pain"),
    ("麻木", "Numbness"),
    ("发麻", "Tingling"),
    ("僵硬", "Stiffness"),
    ("发紧", "Tightness"),
    # Onset and duration
    ("从昨天开始", "Since yesterday"),
    ("从今天早上开始", "Since this morning"),
    ("两天了", "For two days"),
    ("一个星期了", "For a week"),
    ("一个月了", "For a month"),
    ("大概一个月", "About a month"),
    ("几天了", "For a few days"),
    ("很久了", "For a long time"),
    ("刚开始", "Just started"),
    ("昨天", "Yesterday"),
    ("今天", "Today"),
    ("上周", "Last week"),
    ("上个月", "Last month"),
    ("一周", "One week"),
    ("两周", "Two weeks"),
    ("三天", "Three days"),
    ("五天", "Five days"),
    ("十天", "Ten days"),
    ("半个月", "Half a month"),
    ("两个月", "Two months"),
    ("很多年了", "For many years"),
    # History, medication and answers
    ("以前有过", "I had it before"),
    ("第一次", "First time"),
    ("家族史", "Family history"),
    ("遗传", "Hereditary"),
    ("高血压", "High blood pressure"),
    ("糖尿病", "Diabetes"),
    ("心脏病", "Heart disease"),
    ("哮喘", "Asthma"),
    ("过敏史", "Allergy history"),
    ("药物过敏", "Drug allergy"),
    ("食物过敏", "Food allergy"),
    ("怀孕", "Pregnant"),
    ("怀孕了", "I am pregnant"),
    ("月经", "Menstruation"),
    ("生理期", "Menstrual period"),
    ("吃药", "Taking medication"),
    ("正在吃药", "Currently taking medication"),
    ("没吃药", "Not taking medication"),
    ("按时吃药", "Taking medication on time"),
    ("忘记吃药", "Forgot to take medication"),
    ("手术", "Surgery"),
    ("做过手术", "Had surgery"),
    ("住院", "Hospitalized"),
    ("住过院", "Was hospitalized"),
    ("体检", "Physical examination"),
    ("检查", "Examination"),
    ("化验", "Lab test"),
    ("拍片", "X-ray"),
    ("CT", "CT scan"),
    ("B超", "Ultrasound"),
    ("谢谢", "Thank you"),
    ("再见", "Goodbye"),
    ("是的", "Yes"),
    ("不是", "No"),
    ("我不知道", "I don't know"),
)

CANTONESE_TO_ENGLISH: tuple[tuple[str, str], ...] = (
    # Greetings and general state
    ("你好", "Hello"),
    ("我好好", "I am fine"),
    ("我唔舒服", "I don't feel well"),
    ("我唔好", "I am not well"),
    ("我病咗", "I am sick"),
    ("我感覺唔好", "I don't feel good"),
    ("唔舒服", "Not feeling well"),
    ("好辛苦", "Very uncomfortable"),
    # Location of pain
    ("呢度痛", "It hurts here"),
    ("嗰度痛", "It hurts there"),
    ("頭痛", "I have a headache"),
    ("頭疼", "I have a headache"),
    ("偏頭痛", "I have a migraine"),
    ("肚痛", "My stomach hurts"),
    ("胃痛", "My stomach hurts"),
    ("肚仔痛", "My stomach hurts"),
    ("喉嚨痛", "My throat hurts"),
    ("扁桃腺發炎", "My tonsils are inflamed"),
    ("背脊痛", "My back hurts"),
    ("腰痛", "My lower back hurts"),
    ("頸痛", "My neck hurts"),
    ("膊頭痛", "My shoulder hurts"),
    ("胸口痛", "My chest hurts"),
    ("心口痛", "My chest hurts"),
    ("心臟痛", "My heart hurts"),
    ("膝頭痛", "My knee hurts"),
    ("腳痛", "My leg hurts"),
    ("腳板痛", "My foot hurts"),
    ("手痛", "My hand hurts"),
    ("手臂痛", "My arm hurts"),
    ("眼痛", "My eyes hurt"),
    ("耳仔痛", "My ear hurts"),
    ("牙痛", "I have a toothache"),
    ("牙齒痛", "I have a toothache"),
    # Symptoms
    ("發燒", "I have a fever"),
    ("發熱", "I have a fever"),
    ("高燒", "I have a high fever"),
    ("低燒", "I have a low fever"),
    ("咳", "I am coughing"),
    ("咳嗽", "I am coughing"),
    ("乾咳", "I have a dry cough"),
    ("咳痰", "I am coughing up phlegm"),
    ("流鼻水", "I have a runny nose"),
    ("鼻塞", "My nose is blocked"),
    ("打乞嗤", "I am sneezing"),
    ("感冒", "I have a cold"),
    ("感冒咗", "I have a cold"),
    ("流感", "I have the flu"),
    ("想嘔", "I feel nauseous"),
    ("想吐", "I feel like vomiting"),
    ("嘔吐", "I am vomiting"),
    ("肚瀉", "I have diarrhea"),
    ("腹瀉", "I have diarrhea"),
    ("便秘", "I am constipated"),
    ("頭暈", "I feel dizzy"),
    ("頭昏", "I feel dizzy"),
    ("暈", "I feel dizzy"),
    ("攰", "I am tired"),
    ("好攰", "I am very tired"),
    ("冇力", "I feel weak"),
    ("冇氣力", "I have no energy"),
    ("失眠", "I have insomnia"),
    ("瞓唔著", "Can't sleep"),
    ("瞓唔好", "Can't sleep well"),
    ("冇胃口", "Loss of appetite"),
    ("食唔落", "Can't eat"),
    ("冇食慾", "No appetite"),
    ("心跳快", "Fast heartbeat"),
    ("心慌", "Heart palpitations"),
    ("氣促", "Shortness of breath"),
    ("呼吸困難", "Difficulty breathing"),
    ("過敏", "I am allergic"),
    ("過敏反應", "Allergic reaction"),
    ("皮疹", "I have a rash"),
    ("痕癢", "It's itchy"),
    ("痕", "It's itchy"),
    ("紅腫", "Red and swollen"),
    ("腫脹", "Swelling"),
    # Pain descriptions
    ("痛", "It hurts"),
    ("好痛", "It hurts a lot"),
    ("非常痛", "It hurts very much"),
    ("劇痛", "Severe pain"),
    ("隱痛", "Dull pain"),
    ("有啲痛", "It hurts a little"),
    ("一直痛", "It hurts all the time"),
    ("有時痛", "It hurts sometimes"),
    ("刺痛", "Sharp pain"),
    ("好似針拮咁痛", "Like needle pricks"),
    ("悶痛", "Dull pain"),
    ("脹痛", "Bloating pain"),
    ("酸痛", "Aching pain"),
    ("隱隱作痛", "Dull aching"),
    ("一陣一陣咁痛", "Comes and goes"),
    ("越嚟越痛", "Getting worse"),
    ("冇咁痛喇", "Not as painful now"),
    ("痛到好犀利", "Very painful"),
    ("火辣辣咁痛", "Burning pain"),
    ("麻痺", "Numbness"),
    ("發麻", "Tingling"),
    ("僵硬", "Stiffness"),
    ("發緊", "Tightness"),
    # Onset and duration
    ("從琴日開始", "Since yesterday"),
    ("從今朝開始", "Since this morning"),
    ("兩日喇", "For two days"),
    ("一個禮拜喇", "For a week"),
    ("一個月喇", "For a month"),
    ("大概一個月", "About a month"),
    ("幾日喇", "For a few days"),
    ("好耐喇", "For a long time"),
    ("啱啱開始", "Just started"),
    ("琴日", "Yesterday"),
    ("今日", "Today"),
    ("上星期", "Last week"),
    ("上個月", "Last month"),
    ("一星期", "One week"),
    ("兩星期", "Two weeks"),
    ("三日", "Three days"),
    ("五日", "Five days"),
    ("十日", "Ten days"),
    ("半個月", "Half a month"),
    ("兩個月", "Two months"),
    ("好多年喇", "For many years"),
    # History, medication and answers
    ("以前有過", "I had it before"),
    ("第一次", "First time"),
    ("家族史", "Family history"),
    ("遺傳", "Hereditary"),
    ("高血壓", "High blood pressure"),
    ("糖尿病", "Diabetes"),
    ("心臟病", "Heart disease"),
    ("哮喘", "Asthma"),
    ("過敏史", "Allergy history"),
    ("藥物過敏", "Drug allergy"),
    ("食物過敏", "Food allergy"),
    ("懷孕", "Pregnant"),
    ("懷孕咗", "I am pregnant"),
    ("嚟M", "Menstruation"),
    ("生理期", "Menstrual period"),
    ("食藥", "Taking medication"),
    ("而家食緊藥", "Currently taking medication"),
    ("冇食藥", "Not taking medication"),
    ("準時食藥", "Taking medication on time"),
    ("唔記得食藥", "Forgot to take medication"),
    ("手術", "Surgery"),
    ("做過手術", "Had surgery"),
    ("住院", "Hospitalized"),
    ("住過院", "Was hospitalized"),
    ("身體檢查", "Physical examination"),
    ("檢查", "Examination"),
    ("化驗", "Lab test"),
    ("照X光", "X-ray"),
    ("CT", "CT scan"),
    ("B超", "Ultrasound"),
    ("多謝", "Thank you"),
    ("再見", "Goodbye"),
    ("係", "Yes"),
    ("唔係", "No"),
    ("我唔知", "I don't know"),
)


__all__ = [
    "CANTONESE_TO_ENGLISH",
    "ENGLISH_TO_CANTONESE",
    "ENGLISH_TO_MANDARIN",
    "MANDARIN_TO_ENGLISH",
]
